"""GetAssignableRoles query and handler."""

from uuid import UUID

from trustee_portal.domain.auth.model.identity import Identity
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import OrganizationId
from trustee_portal.domain.auth.service import rbac
from trustee_portal.domain.membership.query.get_role_catalog import RoleDTO, describe_role
from trustee_portal.domain.shared.authorization.gate import authorize_organization
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.authorization.policy import requires_any_permission
from trustee_portal.domain.shared.query import Query, QueryHandler
from trustee_portal.domain.shared.query import Result as QueryResult


class GetAssignableRoles(Query):
    """Roles the caller may invite into, or assign within, an organization."""

    organization_id: UUID


class GetAssignableRolesResult(QueryResult):
    role: Role
    invitable: list[RoleDTO]
    assignable: list[RoleDTO]


class GetAssignableRolesHandler(QueryHandler[GetAssignableRoles, GetAssignableRolesResult]):
    __auth__ = requires_any_permission(Permission.USER_INVITE, Permission.ROLE_ASSIGN)
    identity: Identity

    async def run(self, query: GetAssignableRoles) -> GetAssignableRolesResult:
        principal = self.identity
        assert isinstance(principal, Principal)  # Guaranteed by __auth__ gate
        assert principal.role is not None
        authorize_organization(principal, OrganizationId(query.organization_id))

        return GetAssignableRolesResult(
            role=principal.role,
            invitable=[describe_role(r) for r in rbac.get_invitable_roles(principal.role)],
            assignable=[describe_role(r) for r in rbac.get_assignable_roles(principal.role)],
        )
