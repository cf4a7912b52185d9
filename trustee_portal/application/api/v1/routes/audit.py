"""Audit trail routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from trustee_portal.domain.membership.model import AuditAction
from trustee_portal.domain.membership.query import (
    AuditLog,
    GetResourceHistory,
    GetResourceHistoryHandler,
    ListAuditLog,
    ListAuditLogHandler,
    ResourceHistory,
)

router = APIRouter(
    prefix="/audit/organizations/{org_id}", tags=["Audit"], route_class=DishkaRoute
)


@router.get("/logs", response_model=AuditLog)
async def list_audit_log(
    org_id: UUID,
    handler: FromDishka[ListAuditLogHandler],
    action: AuditAction | None = Query(None),
    resource_type: str | None = Query(None),
    user_id: UUID | None = Query(None),
    since: datetime | None = Query(None, description="Entries at or after this time"),
    until: datetime | None = Query(None, description="Entries at or before this time"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
) -> AuditLog:
    """The organization's audit trail, newest first. Requires audit:view."""
    return await handler.run(
        ListAuditLog(
            organization_id=org_id,
            action=action,
            resource_type=resource_type,
            user_id=user_id,
            since=since,
            until=until,
            page=page,
            limit=limit,
        )
    )


@router.get("/resources/{resource_type}/{resource_id}/history", response_model=ResourceHistory)
async def get_resource_history(
    org_id: UUID,
    resource_type: str,
    resource_id: str,
    handler: FromDishka[GetResourceHistoryHandler],
) -> ResourceHistory:
    """Every audit entry for one invitation or membership. Requires audit:view."""
    return await handler.run(
        GetResourceHistory(
            organization_id=org_id, resource_type=resource_type, resource_id=resource_id
        )
    )
