"""Composable policy types for handler-level authorization gates.

A policy inspects the resolved Principal and either passes (returns None from
``check``) or returns a Denial carrying the stable error code and message the
HTTP layer will surface. Membership-scoped policies let platform super
administrators through unconditionally and deny principals with no active
membership in the organization.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from trustee_portal.domain.auth.model.role import Role, display_name
from trustee_portal.domain.auth.service import rbac
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.error import ErrorCode

if TYPE_CHECKING:
    from trustee_portal.domain.auth.model.principal import Principal


@dataclass(frozen=True)
class Denial:
    """Why a policy refused a principal."""

    code: ErrorCode
    message: str


_ACCESS_DENIED = Denial(ErrorCode.FORBIDDEN, "Access denied")


class Policy(ABC):
    """Base class for composable authorization policies."""

    @abstractmethod
    def check(self, principal: "Principal") -> Denial | None:
        """Return None if the principal satisfies this policy, else a Denial."""
        ...

    def evaluate(self, principal: "Principal") -> bool:
        """Return True if principal satisfies this policy."""
        return self.check(principal) is None

    def __and__(self, other: Policy) -> AllOf:
        return AllOf(policies=(self, other))

    def __or__(self, other: Policy) -> AnyOf:
        return AnyOf(policies=(self, other))

    def __invert__(self) -> Not:
        return Not(policy=self)


class MemberPolicy(Policy):
    """Policy evaluated against the principal's membership role."""

    def check(self, principal: "Principal") -> Denial | None:
        if principal.is_super_admin:
            return None
        if principal.member_role is None:
            return Denial(
                ErrorCode.ORG_MEMBERSHIP_REQUIRED,
                "Organization membership required",
            )
        return self._check_role(principal.member_role)

    @abstractmethod
    def _check_role(self, role: Role) -> Denial | None: ...


@dataclass(frozen=True)
class RequiresPermissions(MemberPolicy):
    """Policy that checks the member role holds every listed permission."""

    permissions: tuple[Permission, ...]

    def _check_role(self, role: Role) -> Denial | None:
        if rbac.has_all_permissions(role, self.permissions):
            return None
        return Denial(
            ErrorCode.INSUFFICIENT_PERMISSIONS,
            f"Required permissions: {', '.join(self.permissions)}",
        )


@dataclass(frozen=True)
class RequiresAnyPermission(MemberPolicy):
    """Policy that checks the member role holds at least one listed permission."""

    permissions: tuple[Permission, ...]

    def _check_role(self, role: Role) -> Denial | None:
        if rbac.has_any_permission(role, self.permissions):
            return None
        return Denial(
            ErrorCode.INSUFFICIENT_PERMISSIONS,
            f"Requires one of: {', '.join(self.permissions)}",
        )


@dataclass(frozen=True)
class RequiresRole(MemberPolicy):
    """Policy that checks the member role is one of the listed roles (no hierarchy)."""

    roles: tuple[Role, ...]

    def _check_role(self, role: Role) -> Denial | None:
        if role in self.roles:
            return None
        return Denial(
            ErrorCode.INSUFFICIENT_ROLE,
            f"Required roles: {', '.join(display_name(r) for r in self.roles)}",
        )


@dataclass(frozen=True)
class RequiresMinimumRole(MemberPolicy):
    """Policy that checks the member role ranks at least as high as the given role."""

    role: Role

    def _check_role(self, role: Role) -> Denial | None:
        if rbac.has_minimum_role(role, self.role):
            return None
        return Denial(
            ErrorCode.INSUFFICIENT_ROLE,
            f"Requires {display_name(self.role)} or higher",
        )


@dataclass(frozen=True)
class RequiresOwner(Policy):
    """Policy that checks the principal owns the organization."""

    def check(self, principal: "Principal") -> Denial | None:
        if principal.is_super_admin or principal.member_role == Role.OWNER:
            return None
        return Denial(ErrorCode.OWNER_REQUIRED, "Organization owner access required")


@dataclass(frozen=True)
class RequiresSuperAdmin(Policy):
    """Policy that checks the principal is a platform super administrator."""

    def check(self, principal: "Principal") -> Denial | None:
        if principal.is_super_admin:
            return None
        return Denial(
            ErrorCode.SUPER_ADMIN_REQUIRED,
            "Super administrator access required",
        )


@dataclass(frozen=True)
class AllOf(Policy):
    """Policy that requires ALL sub-policies to pass. Reports the first denial."""

    policies: tuple[Policy, ...]

    def check(self, principal: "Principal") -> Denial | None:
        for policy in self.policies:
            denial = policy.check(principal)
            if denial is not None:
                return denial
        return None

    def __and__(self, other: Policy) -> AllOf:
        return AllOf(policies=(*self.policies, other))


@dataclass(frozen=True)
class AnyOf(Policy):
    """Policy that requires at least ONE sub-policy to pass. Reports the last denial."""

    policies: tuple[Policy, ...]

    def check(self, principal: "Principal") -> Denial | None:
        denial: Denial | None = _ACCESS_DENIED
        for policy in self.policies:
            denial = policy.check(principal)
            if denial is None:
                return None
        return denial

    def __or__(self, other: Policy) -> AnyOf:
        return AnyOf(policies=(*self.policies, other))


@dataclass(frozen=True)
class Not(Policy):
    """Policy that inverts another policy."""

    policy: Policy

    def check(self, principal: "Principal") -> Denial | None:
        if self.policy.check(principal) is None:
            return _ACCESS_DENIED
        return None


def requires_permission(*permissions: Permission) -> RequiresPermissions:
    """Factory: policy requiring every given permission."""
    return RequiresPermissions(permissions=permissions)


def requires_any_permission(*permissions: Permission) -> RequiresAnyPermission:
    """Factory: policy requiring at least one of the given permissions."""
    return RequiresAnyPermission(permissions=permissions)


def requires_role(*roles: Role) -> RequiresRole:
    """Factory: policy requiring one of the given membership roles exactly."""
    return RequiresRole(roles=roles)


def requires_minimum_role(role: Role) -> RequiresMinimumRole:
    """Factory: policy requiring at least the given role in the hierarchy."""
    return RequiresMinimumRole(role=role)


def requires_owner() -> RequiresOwner:
    return RequiresOwner()


def requires_super_admin() -> RequiresSuperAdmin:
    return RequiresSuperAdmin()


REQUIRE_ADMIN = requires_role(Role.OWNER, Role.ADMIN)
REQUIRE_ADMIN_OR_CHAIR = requires_role(Role.OWNER, Role.ADMIN, Role.CHAIR)
REQUIRE_BOARD_MEMBER = requires_role(
    Role.OWNER,
    Role.ADMIN,
    Role.CHAIR,
    Role.VICE_CHAIR,
    Role.TREASURER,
    Role.SECRETARY,
    Role.TRUSTEE,
)
REQUIRE_COMPLIANCE = requires_role(Role.OWNER, Role.ADMIN, Role.MLRO, Role.COMPLIANCE_OFFICER)
