"""GetRoleCatalog query and handler."""

from pydantic import BaseModel

from trustee_portal.domain.auth.model.role import ROLE_DESCRIPTIONS, Role, display_name
from trustee_portal.domain.auth.service import rbac
from trustee_portal.domain.shared.authorization.gate import public
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.query import Query, QueryHandler
from trustee_portal.domain.shared.query import Result as QueryResult


class GetRoleCatalog(Query):
    """Query for every role with its rank and permissions."""


class RoleDTO(BaseModel):
    role: Role
    display_name: str
    description: str
    level: int
    permissions: list[Permission]


class GetRoleCatalogResult(QueryResult):
    roles: list[RoleDTO]


def describe_role(role: Role) -> RoleDTO:
    return RoleDTO(
        role=role,
        display_name=display_name(role),
        description=ROLE_DESCRIPTIONS.get(role, ""),
        level=rbac.get_role_level(role),
        permissions=rbac.get_role_permissions(role),
    )


class GetRoleCatalogHandler(QueryHandler[GetRoleCatalog, GetRoleCatalogResult]):
    __auth__ = public()

    async def run(self, query: GetRoleCatalog) -> GetRoleCatalogResult:
        return GetRoleCatalogResult(roles=[describe_role(role) for role in Role])
