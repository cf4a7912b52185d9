"""Audit entries recorded for membership changes."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from trustee_portal.domain.auth.model.value import AuditEntryId, OrganizationId, UserId


class AuditAction(StrEnum):
    INVITE = "invite"
    INVITATION_CANCEL = "invitation_cancel"
    ROLE_CHANGE = "role_change"
    MEMBER_REMOVE = "member_remove"


class AuditEntry(BaseModel):
    """Who did what to which resource, and when."""

    id: AuditEntryId
    organization_id: OrganizationId
    user_id: UserId
    action: AuditAction
    resource_type: str
    resource_id: str
    details: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime

    @classmethod
    def record(
        cls,
        organization_id: OrganizationId,
        user_id: UserId,
        action: AuditAction,
        resource_type: str,
        resource_id: str,
        details: dict[str, Any] | None = None,
    ) -> "AuditEntry":
        return cls(
            id=AuditEntryId.generate(),
            organization_id=organization_id,
            user_id=user_id,
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            details=details or {},
            created_at=datetime.now(UTC),
        )


class AuditFilter(BaseModel):
    """Narrows an organization's audit trail. Unset fields match everything."""

    action: AuditAction | None = None
    resource_type: str | None = None
    resource_id: str | None = None
    user_id: UserId | None = None
    since: datetime | None = None
    until: datetime | None = None

    def matches(self, entry: AuditEntry) -> bool:
        if self.action is not None and entry.action != self.action:
            return False
        if self.resource_type is not None and entry.resource_type != self.resource_type:
            return False
        if self.resource_id is not None and entry.resource_id != self.resource_id:
            return False
        if self.user_id is not None and entry.user_id != self.user_id:
            return False
        if self.since is not None and entry.created_at < self.since:
            return False
        if self.until is not None and entry.created_at > self.until:
            return False
        return True
