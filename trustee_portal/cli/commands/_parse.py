"""Argument parsing shared by the role commands."""

import sys

from trustee_portal.cli.console import get_console
from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.shared.authorization.permission import Permission


def parse_role(value: str) -> Role:
    """Parse a role wire value (e.g. ``vice_chair``), exiting with status 2 if unknown."""
    try:
        return Role(value.strip().lower())
    except ValueError:
        get_console().error(
            f"Unknown role: {value}",
            hint="Valid roles: " + ", ".join(r.value for r in Role),
        )
        sys.exit(2)


def parse_permission(value: str) -> Permission:
    """Parse a permission token (e.g. ``user:invite``), exiting with status 2 if unknown."""
    try:
        return Permission(value.strip().lower())
    except ValueError:
        get_console().error(
            f"Unknown permission: {value}",
            hint="Run 'trustee-portal permissions owner' to list permission tokens",
        )
        sys.exit(2)
