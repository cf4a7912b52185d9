"""Role catalog routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from trustee_portal.domain.membership.query import (
    GetAssignableRoles,
    GetAssignableRolesHandler,
    GetAssignableRolesResult,
    GetRoleCatalog,
    GetRoleCatalogHandler,
    GetRoleCatalogResult,
)

router = APIRouter(tags=["Roles"], route_class=DishkaRoute)


@router.get("/roles", response_model=GetRoleCatalogResult)
async def list_roles(
    handler: FromDishka[GetRoleCatalogHandler],
) -> GetRoleCatalogResult:
    """Every role with its display name, rank and permissions. Public."""
    return await handler.run(GetRoleCatalog())


@router.get(
    "/organizations/{org_id}/roles/assignable",
    response_model=GetAssignableRolesResult,
)
async def list_assignable_roles(
    org_id: UUID,
    handler: FromDishka[GetAssignableRolesHandler],
) -> GetAssignableRolesResult:
    """Roles the caller can invite or assign. Requires user:invite or role:assign."""
    return await handler.run(GetAssignableRoles(organization_id=org_id))
