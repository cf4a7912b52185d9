"""ListMembers query and handler."""

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, Field

from trustee_portal.domain.auth.model.identity import Identity
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import OrganizationId
from trustee_portal.domain.membership.port import InvitationRepository, MembershipRepository
from trustee_portal.domain.shared.authorization.gate import authorize_organization
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.authorization.policy import requires_permission
from trustee_portal.domain.shared.query import Query, QueryHandler
from trustee_portal.domain.shared.query import Result as QueryResult


class MemberStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ALL = "all"


_ACTIVE_FILTER: dict[MemberStatus, bool | None] = {
    MemberStatus.ACTIVE: True,
    MemberStatus.INACTIVE: False,
    MemberStatus.ALL: None,
}


class ListMembers(Query):
    """One page of an organization's members plus its pending invitations."""

    organization_id: UUID
    status: MemberStatus = MemberStatus.ACTIVE
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class MemberDTO(BaseModel):
    id: str
    user_id: str
    email: str
    role: Role
    department: str | None
    title: str | None
    is_active: bool
    joined_at: datetime


class PendingInvitationDTO(BaseModel):
    id: str
    email: str
    role: Role
    department: str | None
    invited_by: str
    invited_at: datetime
    expires_at: datetime


class MemberList(QueryResult):
    members: list[MemberDTO]
    pending_invitations: list[PendingInvitationDTO]
    total: int
    page: int
    limit: int


class ListMembersHandler(QueryHandler[ListMembers, MemberList]):
    __auth__ = requires_permission(Permission.USER_VIEW)
    identity: Identity
    membership_repo: MembershipRepository
    invitation_repo: InvitationRepository

    async def run(self, query: ListMembers) -> MemberList:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        organization_id = OrganizationId(query.organization_id)
        authorize_organization(self.identity, organization_id)

        is_active = _ACTIVE_FILTER[query.status]
        members = await self.membership_repo.list_for_organization(
            organization_id,
            is_active=is_active,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
        )
        total = await self.membership_repo.count(organization_id, is_active=is_active)
        invitations = await self.invitation_repo.list_pending(organization_id)

        return MemberList(
            members=[
                MemberDTO(
                    id=str(m.id),
                    user_id=str(m.user_id),
                    email=m.email,
                    role=m.role,
                    department=m.department,
                    title=m.title,
                    is_active=m.is_active,
                    joined_at=m.joined_at,
                )
                for m in members
            ],
            pending_invitations=[
                PendingInvitationDTO(
                    id=str(i.id),
                    email=i.email,
                    role=i.role,
                    department=i.department,
                    invited_by=str(i.invited_by),
                    invited_at=i.invited_at,
                    expires_at=i.expires_at,
                )
                for i in invitations
            ],
            total=total,
            page=query.page,
            limit=query.limit,
        )
