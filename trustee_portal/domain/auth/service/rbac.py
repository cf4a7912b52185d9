"""Role-based access control decisions.

Pure functions over the role hierarchy and the permission matrix. Nothing
here performs I/O, holds state, or raises for well-formed input: denials are
ordinary return values, and the caller decides how to surface them.

A role value missing from the tables is treated as the weakest possible role
(rank 0, no permissions), so unknown data never grants access.
"""

from collections.abc import Iterable

from trustee_portal.domain.auth.model.role import ROLE_HIERARCHY, Role
from trustee_portal.domain.auth.model.transition import RoleTransition
from trustee_portal.domain.shared.authorization.matrix import PERMISSION_MATRIX
from trustee_portal.domain.shared.authorization.permission import Permission

# Never reachable through the invitation flow, whoever is inviting.
_NON_INVITABLE = frozenset({Role.SUPER_ADMIN, Role.OWNER})

_EMPTY: frozenset[Permission] = frozenset()


def get_role_level(role: Role) -> int:
    """Rank of a role in the hierarchy; 0 for unknown roles."""
    return ROLE_HIERARCHY.get(role, 0)


def get_role_permissions(role: Role) -> list[Permission]:
    """Permissions held by a role, in Permission declaration order.

    Returns a new list each call.
    """
    granted = PERMISSION_MATRIX.get(role, _EMPTY)
    return [permission for permission in Permission if permission in granted]


def has_permission(role: Role, permission: Permission) -> bool:
    if role == Role.SUPER_ADMIN:
        return True
    return permission in PERMISSION_MATRIX.get(role, _EMPTY)


def has_all_permissions(role: Role, permissions: Iterable[Permission]) -> bool:
    """True if the role holds every permission (vacuously true when empty)."""
    return all(has_permission(role, p) for p in permissions)


def has_any_permission(role: Role, permissions: Iterable[Permission]) -> bool:
    """True if the role holds at least one permission (false when empty)."""
    return any(has_permission(role, p) for p in permissions)


def has_minimum_role(actor_role: Role, required_role: Role) -> bool:
    """True if the actor ranks at or above the required role."""
    if actor_role == Role.SUPER_ADMIN:
        return True
    return get_role_level(actor_role) >= get_role_level(required_role)


def can_manage_role(manager_role: Role, target_role: Role) -> bool:
    """True if the manager may invite, promote, demote or remove the target role.

    Nobody manages the super administrator role. Everyone else needs a
    strictly higher rank, so peers (and a role itself) are never manageable.
    """
    if target_role == Role.SUPER_ADMIN:
        return False
    if manager_role == Role.SUPER_ADMIN:
        return True
    return get_role_level(manager_role) > get_role_level(target_role)


def get_invitable_roles(inviter_role: Role) -> list[Role]:
    """Roles the inviter may offer in an invitation, most senior first."""
    return [
        role
        for role in Role
        if role not in _NON_INVITABLE and can_manage_role(inviter_role, role)
    ]


def get_assignable_roles(assigner_role: Role) -> list[Role]:
    """Roles the assigner may grant directly.

    Only a super administrator may grant ownership; for everyone else this is
    the invitable set.
    """
    if assigner_role == Role.SUPER_ADMIN:
        return [role for role in Role if role != Role.SUPER_ADMIN]
    return get_invitable_roles(assigner_role)


def can_transition_role(
    current_role: Role,
    new_role: Role,
    changed_by: Role,
) -> RoleTransition:
    """Validate moving a member from ``current_role`` to ``new_role``.

    Identity checks run before authority checks; the first failure wins. The
    actor must be able to manage both the role being left and the role being
    entered.
    """
    if current_role == new_role:
        return RoleTransition.rejected("New role must be different from current role")

    if current_role == Role.SUPER_ADMIN:
        return RoleTransition.rejected("Cannot modify super administrator roles")

    if new_role == Role.SUPER_ADMIN:
        return RoleTransition.rejected("Cannot assign super administrator role")

    if not can_manage_role(changed_by, new_role):
        return RoleTransition.rejected("Insufficient permissions to assign this role")

    if not can_manage_role(changed_by, current_role):
        return RoleTransition.rejected("Insufficient permissions to modify this role")

    return RoleTransition.allowed()


def compare_roles(role_a: Role, role_b: Role) -> int:
    """Three-way rank comparison (-1, 0, 1) for sorting and display only.

    Authorization decisions go through can_manage_role / has_minimum_role,
    which apply the super administrator override and strict ordering.
    """
    level_a = get_role_level(role_a)
    level_b = get_role_level(role_b)
    return (level_a > level_b) - (level_a < level_b)
