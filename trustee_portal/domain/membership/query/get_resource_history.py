"""GetResourceHistory query and handler."""

from uuid import UUID

from trustee_portal.domain.auth.model.identity import Identity
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.value import OrganizationId
from trustee_portal.domain.membership.model import AuditFilter
from trustee_portal.domain.membership.port import AuditLogRepository
from trustee_portal.domain.membership.query.list_audit_log import AuditEntryDTO
from trustee_portal.domain.shared.authorization.gate import authorize_organization
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.authorization.policy import requires_permission
from trustee_portal.domain.shared.query import Query, QueryHandler
from trustee_portal.domain.shared.query import Result as QueryResult


class GetResourceHistory(Query):
    """Every audit entry for one resource (an invitation or a membership)."""

    organization_id: UUID
    resource_type: str
    resource_id: str


class ResourceHistory(QueryResult):
    items: list[AuditEntryDTO]


class GetResourceHistoryHandler(QueryHandler[GetResourceHistory, ResourceHistory]):
    __auth__ = requires_permission(Permission.AUDIT_VIEW)
    identity: Identity
    audit_repo: AuditLogRepository

    async def run(self, query: GetResourceHistory) -> ResourceHistory:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        organization_id = OrganizationId(query.organization_id)
        authorize_organization(self.identity, organization_id)

        entries = await self.audit_repo.search(
            organization_id,
            AuditFilter(resource_type=query.resource_type, resource_id=query.resource_id),
        )
        return ResourceHistory(items=[AuditEntryDTO.from_entry(e) for e in entries])
