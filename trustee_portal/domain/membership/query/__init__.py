"""Membership domain queries."""

from .get_assignable_roles import (
    GetAssignableRoles,
    GetAssignableRolesHandler,
    GetAssignableRolesResult,
)
from .get_resource_history import GetResourceHistory, GetResourceHistoryHandler, ResourceHistory
from .get_role_catalog import GetRoleCatalog, GetRoleCatalogHandler, GetRoleCatalogResult, RoleDTO
from .list_audit_log import AuditEntryDTO, AuditLog, ListAuditLog, ListAuditLogHandler
from .list_members import (
    ListMembers,
    ListMembersHandler,
    MemberDTO,
    MemberList,
    MemberStatus,
    PendingInvitationDTO,
)

__all__ = [
    "AuditEntryDTO",
    "AuditLog",
    "GetAssignableRoles",
    "GetAssignableRolesHandler",
    "GetAssignableRolesResult",
    "GetResourceHistory",
    "GetResourceHistoryHandler",
    "GetRoleCatalog",
    "GetRoleCatalogHandler",
    "GetRoleCatalogResult",
    "ListAuditLog",
    "ListAuditLogHandler",
    "ListMembers",
    "ListMembersHandler",
    "MemberDTO",
    "MemberList",
    "MemberStatus",
    "PendingInvitationDTO",
    "ResourceHistory",
    "RoleDTO",
]
