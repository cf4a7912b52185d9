"""Commands that inspect the role hierarchy and permission matrix."""

import sys

from trustee_portal.cli.commands._parse import parse_permission, parse_role
from trustee_portal.cli.console import get_console
from trustee_portal.domain.auth.model.role import ROLE_DESCRIPTIONS, Role, display_name
from trustee_portal.domain.auth.service import rbac


def roles() -> None:
    """List every role with its rank, most senior first."""
    get_console().table(
        [
            {
                "role": role.value,
                "name": display_name(role),
                "level": rbac.get_role_level(role),
                "description": ROLE_DESCRIPTIONS.get(role, ""),
            }
            for role in Role
        ],
        [("role", "Role"), ("name", "Name"), ("level", "Level"), ("description", "Description")],
        title="Roles",
    )


def permissions(role: str) -> None:
    """List the permissions a role holds.

    Args:
        role: Role value, e.g. ``treasurer``.
    """
    parsed = parse_role(role)
    console = get_console()
    granted = rbac.get_role_permissions(parsed)
    console.print(f"[bold]{display_name(parsed)}[/bold] ({len(granted)} permissions)")
    for permission in granted:
        console.print(f"  {permission.value}")


def check(role: str, permission: str) -> None:
    """Check whether a role holds a permission. Exits with status 1 when denied.

    Args:
        role: Role value, e.g. ``trustee``.
        permission: Permission token, e.g. ``meeting:create``.
    """
    parsed_role = parse_role(role)
    parsed_permission = parse_permission(permission)
    console = get_console()

    if rbac.has_permission(parsed_role, parsed_permission):
        console.success(f"{display_name(parsed_role)} has {parsed_permission.value}")
        return

    console.error(f"{display_name(parsed_role)} does not have {parsed_permission.value}")
    sys.exit(1)


def transition(current: str, new: str, *, by: str) -> None:
    """Check whether a member's role may change. Exits with status 1 when rejected.

    Args:
        current: The member's current role.
        new: The requested role.
        by: Role of the member making the change.
    """
    result = rbac.can_transition_role(parse_role(current), parse_role(new), parse_role(by))
    console = get_console()

    if result.valid:
        console.success(f"{current} -> {new} allowed for {by}")
        return

    console.error(f"{current} -> {new} rejected for {by}: {result.reason}")
    sys.exit(1)
