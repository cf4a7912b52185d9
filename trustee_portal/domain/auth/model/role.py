"""Governance roles, their hierarchy ranks and display metadata."""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType


class Role(StrEnum):
    """Roles a user can hold within one organization's membership.

    Declared from most to least senior. The wire value is the member value.
    SUPER_ADMIN is the platform role and overrides every check rather than
    simply ranking highest.
    """

    SUPER_ADMIN = "super_admin"
    OWNER = "owner"
    ADMIN = "admin"
    CHAIR = "chair"
    VICE_CHAIR = "vice_chair"
    TREASURER = "treasurer"
    SECRETARY = "secretary"
    MLRO = "mlro"
    COMPLIANCE_OFFICER = "compliance_officer"
    HEALTH_OFFICER = "health_officer"
    TRUSTEE = "trustee"
    VOLUNTEER = "volunteer"
    VIEWER = "viewer"


# Higher = more authority. Treasurer/secretary and the three officer roles
# share a rank, so they cannot manage each other.
ROLE_HIERARCHY: Mapping[Role, int] = MappingProxyType(
    {
        Role.SUPER_ADMIN: 100,
        Role.OWNER: 90,
        Role.ADMIN: 80,
        Role.CHAIR: 75,
        Role.VICE_CHAIR: 70,
        Role.TREASURER: 65,
        Role.SECRETARY: 65,
        Role.MLRO: 60,
        Role.COMPLIANCE_OFFICER: 60,
        Role.HEALTH_OFFICER: 60,
        Role.TRUSTEE: 50,
        Role.VOLUNTEER: 30,
        Role.VIEWER: 10,
    }
)

ROLE_DISPLAY_NAMES: Mapping[Role, str] = MappingProxyType(
    {
        Role.SUPER_ADMIN: "Super Administrator",
        Role.OWNER: "Organization Owner",
        Role.ADMIN: "Administrator",
        Role.CHAIR: "Chair",
        Role.VICE_CHAIR: "Vice Chair",
        Role.TREASURER: "Treasurer",
        Role.SECRETARY: "Secretary",
        Role.MLRO: "MLRO",
        Role.COMPLIANCE_OFFICER: "Compliance Officer",
        Role.HEALTH_OFFICER: "Health Officer",
        Role.TRUSTEE: "Trustee",
        Role.VOLUNTEER: "Volunteer",
        Role.VIEWER: "Viewer",
    }
)

ROLE_DESCRIPTIONS: Mapping[Role, str] = MappingProxyType(
    {
        Role.SUPER_ADMIN: "Platform administrator with access to all organizations",
        Role.OWNER: "Full control over the organization and its settings",
        Role.ADMIN: "Manage users, documents, and most organization settings",
        Role.CHAIR: "Lead the board, approve documents, manage meetings",
        Role.VICE_CHAIR: "Assist the chair and stand in when needed",
        Role.TREASURER: "Manage financial matters and billing",
        Role.SECRETARY: "Manage meetings, minutes, and records",
        Role.MLRO: "Money Laundering Reporting Officer - compliance duties",
        Role.COMPLIANCE_OFFICER: "Ensure regulatory compliance",
        Role.HEALTH_OFFICER: "Health and safety compliance",
        Role.TRUSTEE: "Board member with standard access",
        Role.VOLUNTEER: "Limited access for volunteers",
        Role.VIEWER: "Read-only access to organization content",
    }
)


def display_name(role: Role) -> str:
    """Human-readable name for a role, falling back to its wire value."""
    return ROLE_DISPLAY_NAMES.get(role, str(role))
