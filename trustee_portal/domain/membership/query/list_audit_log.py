"""ListAuditLog query and handler."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from trustee_portal.domain.auth.model.identity import Identity
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.value import OrganizationId, UserId
from trustee_portal.domain.membership.model import AuditAction, AuditEntry, AuditFilter
from trustee_portal.domain.membership.port import AuditLogRepository
from trustee_portal.domain.shared.authorization.gate import authorize_organization
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.authorization.policy import requires_permission
from trustee_portal.domain.shared.query import Query, QueryHandler
from trustee_portal.domain.shared.query import Result as QueryResult


class ListAuditLog(Query):
    """One page of an organization's audit trail, newest first."""

    organization_id: UUID
    action: AuditAction | None = None
    resource_type: str | None = None
    user_id: UUID | None = None
    since: datetime | None = None
    until: datetime | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class AuditEntryDTO(BaseModel):
    id: str
    user_id: str
    action: AuditAction
    resource_type: str
    resource_id: str
    details: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: AuditEntry) -> "AuditEntryDTO":
        return cls(
            id=str(entry.id),
            user_id=str(entry.user_id),
            action=entry.action,
            resource_type=entry.resource_type,
            resource_id=entry.resource_id,
            details=entry.details,
            created_at=entry.created_at,
        )


class AuditLog(QueryResult):
    items: list[AuditEntryDTO]
    total: int
    page: int
    limit: int


class ListAuditLogHandler(QueryHandler[ListAuditLog, AuditLog]):
    __auth__ = requires_permission(Permission.AUDIT_VIEW)
    identity: Identity
    audit_repo: AuditLogRepository

    async def run(self, query: ListAuditLog) -> AuditLog:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        organization_id = OrganizationId(query.organization_id)
        authorize_organization(self.identity, organization_id)

        criteria = AuditFilter(
            action=query.action,
            resource_type=query.resource_type,
            user_id=UserId(query.user_id) if query.user_id else None,
            since=query.since,
            until=query.until,
        )
        entries = await self.audit_repo.search(
            organization_id,
            criteria,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
        )
        return AuditLog(
            items=[AuditEntryDTO.from_entry(e) for e in entries],
            total=await self.audit_repo.count(organization_id, criteria),
            page=query.page,
            limit=query.limit,
        )
