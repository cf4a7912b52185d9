"""Tests for composable policies and their denial codes."""

import pytest

from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import OrganizationId, UserId
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.authorization.policy import (
    REQUIRE_ADMIN,
    REQUIRE_ADMIN_OR_CHAIR,
    REQUIRE_BOARD_MEMBER,
    REQUIRE_COMPLIANCE,
    AllOf,
    AnyOf,
    Not,
    requires_any_permission,
    requires_minimum_role,
    requires_owner,
    requires_permission,
    requires_role,
    requires_super_admin,
)
from trustee_portal.domain.shared.error import ErrorCode


def _make_principal(role: Role | None = None, *, super_admin: bool = False) -> Principal:
    return Principal(
        user_id=UserId.generate(),
        is_super_admin=super_admin,
        organization_id=OrganizationId.generate(),
        member_role=role,
    )


class TestRequiresPermission:
    def test_passes_when_role_holds_all(self) -> None:
        policy = requires_permission(Permission.USER_INVITE, Permission.USER_VIEW)
        assert policy.check(_make_principal(Role.CHAIR)) is None

    def test_denial_lists_required_permissions(self) -> None:
        policy = requires_permission(Permission.USER_INVITE, Permission.USER_DELETE)
        denial = policy.check(_make_principal(Role.CHAIR))
        assert denial is not None
        assert denial.code == ErrorCode.INSUFFICIENT_PERMISSIONS
        assert denial.message == "Required permissions: user:invite, user:delete"

    def test_no_membership(self) -> None:
        denial = requires_permission(Permission.ORG_VIEW).check(_make_principal())
        assert denial is not None
        assert denial.code == ErrorCode.ORG_MEMBERSHIP_REQUIRED

    def test_super_admin_bypasses(self) -> None:
        policy = requires_permission(Permission.PLATFORM_ADMIN)
        assert policy.check(_make_principal(super_admin=True)) is None


class TestRequiresAnyPermission:
    def test_one_is_enough(self) -> None:
        policy = requires_any_permission(Permission.USER_INVITE, Permission.ROLE_ASSIGN)
        assert policy.evaluate(_make_principal(Role.SECRETARY))

    def test_none_held(self) -> None:
        policy = requires_any_permission(Permission.USER_INVITE, Permission.ROLE_ASSIGN)
        denial = policy.check(_make_principal(Role.TRUSTEE))
        assert denial is not None
        assert denial.code == ErrorCode.INSUFFICIENT_PERMISSIONS


class TestRequiresRole:
    def test_exact_role_matches(self) -> None:
        assert requires_role(Role.CHAIR).evaluate(_make_principal(Role.CHAIR))

    def test_no_hierarchy(self) -> None:
        assert not requires_role(Role.CHAIR).evaluate(_make_principal(Role.OWNER))

    def test_denial_uses_display_names(self) -> None:
        denial = requires_role(Role.OWNER, Role.VICE_CHAIR).check(_make_principal(Role.TRUSTEE))
        assert denial is not None
        assert denial.code == ErrorCode.INSUFFICIENT_ROLE
        assert denial.message == "Required roles: Organization Owner, Vice Chair"


class TestRequiresMinimumRole:
    def test_higher_role_passes(self) -> None:
        assert requires_minimum_role(Role.TRUSTEE).evaluate(_make_principal(Role.CHAIR))

    def test_equal_rank_passes(self) -> None:
        assert requires_minimum_role(Role.TREASURER).evaluate(_make_principal(Role.SECRETARY))

    def test_lower_role_denied(self) -> None:
        denial = requires_minimum_role(Role.CHAIR).check(_make_principal(Role.TRUSTEE))
        assert denial is not None
        assert denial.code == ErrorCode.INSUFFICIENT_ROLE
        assert denial.message == "Requires Chair or higher"


class TestOwnerAndSuperAdmin:
    def test_owner_required(self) -> None:
        denial = requires_owner().check(_make_principal(Role.ADMIN))
        assert denial is not None
        assert denial.code == ErrorCode.OWNER_REQUIRED

    def test_owner_passes(self) -> None:
        assert requires_owner().evaluate(_make_principal(Role.OWNER))

    def test_super_admin_required_even_for_owner(self) -> None:
        denial = requires_super_admin().check(_make_principal(Role.OWNER))
        assert denial is not None
        assert denial.code == ErrorCode.SUPER_ADMIN_REQUIRED

    def test_super_admin_without_membership(self) -> None:
        assert requires_super_admin().evaluate(_make_principal(super_admin=True))


class TestComposition:
    def test_and(self) -> None:
        policy = requires_permission(Permission.DOC_VIEW) & requires_minimum_role(Role.CHAIR)
        assert isinstance(policy, AllOf)
        assert policy.evaluate(_make_principal(Role.CHAIR))
        assert not policy.evaluate(_make_principal(Role.TRUSTEE))

    def test_and_reports_first_denial(self) -> None:
        policy = requires_owner() & requires_super_admin()
        denial = policy.check(_make_principal(Role.TRUSTEE))
        assert denial is not None
        assert denial.code == ErrorCode.OWNER_REQUIRED

    def test_or(self) -> None:
        policy = requires_role(Role.MLRO) | requires_role(Role.TREASURER)
        assert isinstance(policy, AnyOf)
        assert policy.evaluate(_make_principal(Role.TREASURER))
        assert not policy.evaluate(_make_principal(Role.TRUSTEE))

    def test_chained_and_flattens(self) -> None:
        policy = requires_owner() & requires_owner() & requires_owner()
        assert isinstance(policy, AllOf)
        assert len(policy.policies) == 3

    def test_not(self) -> None:
        policy = ~requires_role(Role.VIEWER)
        assert isinstance(policy, Not)
        assert policy.evaluate(_make_principal(Role.TRUSTEE))
        denial = policy.check(_make_principal(Role.VIEWER))
        assert denial is not None
        assert denial.code == ErrorCode.FORBIDDEN

    def test_empty_any_of_denies(self) -> None:
        assert not AnyOf(policies=()).evaluate(_make_principal(Role.OWNER))

    def test_empty_all_of_passes(self) -> None:
        assert AllOf(policies=()).evaluate(_make_principal())

    def test_policies_are_hashable(self) -> None:
        assert requires_role(Role.ADMIN) == requires_role(Role.ADMIN)
        assert hash(requires_role(Role.ADMIN)) == hash(requires_role(Role.ADMIN))


class TestPresets:
    @pytest.mark.parametrize(
        ("policy", "allowed"),
        [
            (REQUIRE_ADMIN, {Role.OWNER, Role.ADMIN}),
            (REQUIRE_ADMIN_OR_CHAIR, {Role.OWNER, Role.ADMIN, Role.CHAIR}),
            (
                REQUIRE_BOARD_MEMBER,
                {
                    Role.OWNER,
                    Role.ADMIN,
                    Role.CHAIR,
                    Role.VICE_CHAIR,
                    Role.TREASURER,
                    Role.SECRETARY,
                    Role.TRUSTEE,
                },
            ),
            (REQUIRE_COMPLIANCE, {Role.OWNER, Role.ADMIN, Role.MLRO, Role.COMPLIANCE_OFFICER}),
        ],
    )
    def test_membership_roles(self, policy, allowed: set[Role]) -> None:
        members = [r for r in Role if r != Role.SUPER_ADMIN]
        passing = {r for r in members if policy.evaluate(_make_principal(r))}
        assert passing == allowed

    @pytest.mark.parametrize(
        "policy", [REQUIRE_ADMIN, REQUIRE_ADMIN_OR_CHAIR, REQUIRE_BOARD_MEMBER, REQUIRE_COMPLIANCE]
    )
    def test_super_admin_passes_presets(self, policy) -> None:
        assert policy.evaluate(_make_principal(super_admin=True))
