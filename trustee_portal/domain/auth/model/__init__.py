"""Auth domain models."""

from .identity import Anonymous, Identity
from .role import ROLE_DESCRIPTIONS, ROLE_DISPLAY_NAMES, ROLE_HIERARCHY, Role, display_name
from .transition import RoleTransition
from .value import AuditEntryId, InvitationId, MembershipId, OrganizationId, UserId
from .principal import Principal

__all__ = [
    "ROLE_DESCRIPTIONS",
    "ROLE_DISPLAY_NAMES",
    "ROLE_HIERARCHY",
    "Anonymous",
    "AuditEntryId",
    "Identity",
    "InvitationId",
    "MembershipId",
    "OrganizationId",
    "Principal",
    "Role",
    "RoleTransition",
    "UserId",
    "display_name",
]
