"""Permission matrix: the single source of truth for "which role may do what".

Entries are authored per role and are not assumed to be monotonic in rank:
a treasurer holds billing:manage, an administrator does not. The super
administrator's entry is derived from the Permission enum when the table is
built, so new permissions reach it without editing this file.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.shared.authorization.permission import Permission

P = Permission

_AUTHORED: dict[Role, tuple[Permission, ...]] = {
    Role.OWNER: (
        P.ORG_MANAGE, P.ORG_VIEW, P.ORG_DELETE,
        P.USER_CREATE, P.USER_UPDATE, P.USER_DELETE, P.USER_VIEW, P.USER_INVITE,
        P.ROLE_ASSIGN, P.ROLE_MANAGE,
        P.DOC_CREATE, P.DOC_UPDATE, P.DOC_DELETE, P.DOC_VIEW, P.DOC_APPROVE,
        P.TASK_CREATE, P.TASK_UPDATE, P.TASK_DELETE, P.TASK_VIEW, P.TASK_ASSIGN,
        P.MEETING_CREATE, P.MEETING_UPDATE, P.MEETING_DELETE, P.MEETING_VIEW,
        P.MEETING_SCHEDULE,
        P.COMMITTEE_CREATE, P.COMMITTEE_UPDATE, P.COMMITTEE_DELETE, P.COMMITTEE_VIEW,
        P.COMPLIANCE_VIEW, P.COMPLIANCE_MANAGE, P.AUDIT_VIEW,
        P.BILLING_VIEW, P.BILLING_MANAGE,
    ),
    Role.ADMIN: (
        P.ORG_VIEW,
        P.USER_CREATE, P.USER_UPDATE, P.USER_VIEW, P.USER_INVITE,
        P.ROLE_ASSIGN,
        P.DOC_CREATE, P.DOC_UPDATE, P.DOC_VIEW, P.DOC_APPROVE,
        P.TASK_CREATE, P.TASK_UPDATE, P.TASK_VIEW, P.TASK_ASSIGN,
        P.MEETING_CREATE, P.MEETING_UPDATE, P.MEETING_VIEW, P.MEETING_SCHEDULE,
        P.COMMITTEE_CREATE, P.COMMITTEE_UPDATE, P.COMMITTEE_VIEW,
        P.COMPLIANCE_VIEW, P.COMPLIANCE_MANAGE,
        P.BILLING_VIEW,
    ),
    Role.CHAIR: (
        P.ORG_VIEW,
        P.USER_VIEW, P.USER_INVITE,
        P.DOC_CREATE, P.DOC_UPDATE, P.DOC_VIEW, P.DOC_APPROVE,
        P.TASK_CREATE, P.TASK_UPDATE, P.TASK_VIEW, P.TASK_ASSIGN,
        P.MEETING_CREATE, P.MEETING_UPDATE, P.MEETING_DELETE, P.MEETING_VIEW,
        P.MEETING_SCHEDULE,
        P.COMMITTEE_CREATE, P.COMMITTEE_UPDATE, P.COMMITTEE_DELETE, P.COMMITTEE_VIEW,
        P.COMPLIANCE_VIEW, P.AUDIT_VIEW,
    ),
    Role.VICE_CHAIR: (
        P.ORG_VIEW,
        P.USER_VIEW,
        P.DOC_CREATE, P.DOC_UPDATE, P.DOC_VIEW,
        P.TASK_CREATE, P.TASK_UPDATE, P.TASK_VIEW, P.TASK_ASSIGN,
        P.MEETING_CREATE, P.MEETING_UPDATE, P.MEETING_VIEW, P.MEETING_SCHEDULE,
        P.COMMITTEE_VIEW,
        P.COMPLIANCE_VIEW,
    ),
    Role.TREASURER: (
        P.ORG_VIEW,
        P.USER_VIEW,
        P.DOC_VIEW, P.DOC_APPROVE,
        P.TASK_VIEW,
        P.MEETING_VIEW,
        P.COMMITTEE_VIEW,
        P.COMPLIANCE_VIEW,
        P.BILLING_VIEW, P.BILLING_MANAGE,
    ),
    Role.SECRETARY: (
        P.ORG_VIEW,
        P.USER_VIEW, P.USER_INVITE,
        P.DOC_CREATE, P.DOC_UPDATE, P.DOC_VIEW,
        P.TASK_CREATE, P.TASK_UPDATE, P.TASK_VIEW, P.TASK_ASSIGN,
        P.MEETING_CREATE, P.MEETING_UPDATE, P.MEETING_VIEW, P.MEETING_SCHEDULE,
        P.COMMITTEE_VIEW,
        P.COMPLIANCE_VIEW,
    ),
    Role.MLRO: (
        P.ORG_VIEW,
        P.USER_VIEW,
        P.DOC_VIEW,
        P.COMPLIANCE_VIEW, P.COMPLIANCE_MANAGE,
        P.AUDIT_VIEW,
    ),
    Role.COMPLIANCE_OFFICER: (
        P.ORG_VIEW,
        P.USER_VIEW,
        P.DOC_VIEW,
        P.COMPLIANCE_VIEW, P.COMPLIANCE_MANAGE,
        P.AUDIT_VIEW,
    ),
    Role.HEALTH_OFFICER: (
        P.ORG_VIEW,
        P.USER_VIEW,
        P.DOC_VIEW,
        P.COMPLIANCE_VIEW,
    ),
    Role.TRUSTEE: (
        P.ORG_VIEW,
        P.USER_VIEW,
        P.DOC_VIEW,
        P.TASK_VIEW,
        P.MEETING_VIEW,
        P.COMMITTEE_VIEW,
        P.COMPLIANCE_VIEW,
    ),
    Role.VOLUNTEER: (
        P.ORG_VIEW,
        P.DOC_VIEW,
        P.TASK_VIEW,
        P.MEETING_VIEW,
    ),
    Role.VIEWER: (
        P.ORG_VIEW,
        P.DOC_VIEW,
        P.MEETING_VIEW,
    ),
}


def build_permission_matrix(
    authored: Mapping[Role, Iterable[Permission]],
) -> Mapping[Role, frozenset[Permission]]:
    """Freeze authored entries and derive the super administrator's entry."""
    matrix = {role: frozenset(perms) for role, perms in authored.items()}
    matrix[Role.SUPER_ADMIN] = frozenset(permission for permission in Permission)
    return MappingProxyType(matrix)


PERMISSION_MATRIX: Mapping[Role, frozenset[Permission]] = build_permission_matrix(_AUTHORED)
