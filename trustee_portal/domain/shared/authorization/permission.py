"""Authorization permissions: atomic capability tokens namespaced by resource."""

from enum import StrEnum


class Permission(StrEnum):
    """Every capability checked by the policy engine."""

    # Organization
    ORG_MANAGE = "org:manage"
    ORG_VIEW = "org:view"
    ORG_DELETE = "org:delete"

    # Users
    USER_CREATE = "user:create"
    USER_UPDATE = "user:update"
    USER_DELETE = "user:delete"
    USER_VIEW = "user:view"
    USER_INVITE = "user:invite"

    # Roles
    ROLE_ASSIGN = "role:assign"
    ROLE_MANAGE = "role:manage"

    # Documents
    DOC_CREATE = "doc:create"
    DOC_UPDATE = "doc:update"
    DOC_DELETE = "doc:delete"
    DOC_VIEW = "doc:view"
    DOC_APPROVE = "doc:approve"

    # Tasks
    TASK_CREATE = "task:create"
    TASK_UPDATE = "task:update"
    TASK_DELETE = "task:delete"
    TASK_VIEW = "task:view"
    TASK_ASSIGN = "task:assign"

    # Meetings
    MEETING_CREATE = "meeting:create"
    MEETING_UPDATE = "meeting:update"
    MEETING_DELETE = "meeting:delete"
    MEETING_VIEW = "meeting:view"
    MEETING_SCHEDULE = "meeting:schedule"

    # Committees
    COMMITTEE_CREATE = "committee:create"
    COMMITTEE_UPDATE = "committee:update"
    COMMITTEE_DELETE = "committee:delete"
    COMMITTEE_VIEW = "committee:view"

    # Compliance
    COMPLIANCE_VIEW = "compliance:view"
    COMPLIANCE_MANAGE = "compliance:manage"
    AUDIT_VIEW = "audit:view"

    # Billing
    BILLING_VIEW = "billing:view"
    BILLING_MANAGE = "billing:manage"

    # Platform
    PLATFORM_ADMIN = "platform:admin"
