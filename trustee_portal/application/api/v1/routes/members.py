"""Organization membership routes: invitations, role changes, removals."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, EmailStr

from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.membership.command import (
    CancelInvitation,
    CancelInvitationHandler,
    CancelInvitationResult,
    ChangeMemberRole,
    ChangeMemberRoleHandler,
    ChangeMemberRoleResult,
    InviteMember,
    InviteMemberHandler,
    InviteMemberResult,
    RemoveMember,
    RemoveMemberHandler,
    RemoveMemberResult,
)
from trustee_portal.domain.membership.query import (
    ListMembers,
    ListMembersHandler,
    MemberList,
    MemberStatus,
)

router = APIRouter(prefix="/organizations/{org_id}", tags=["Members"], route_class=DishkaRoute)


class InviteMemberRequest(BaseModel):
    email: EmailStr
    role: Role
    department: str | None = None
    title: str | None = None


class ChangeRoleRequest(BaseModel):
    role: Role


@router.post("/invitations", response_model=InviteMemberResult, status_code=201)
async def invite_member(
    org_id: UUID,
    body: InviteMemberRequest,
    handler: FromDishka[InviteMemberHandler],
) -> InviteMemberResult:
    """Invite someone into the organization. Requires user:invite."""
    return await handler.run(
        InviteMember(
            organization_id=org_id,
            email=body.email,
            role=body.role,
            department=body.department,
            title=body.title,
        )
    )


@router.delete("/invitations/{invitation_id}", response_model=CancelInvitationResult)
async def cancel_invitation(
    org_id: UUID,
    invitation_id: UUID,
    handler: FromDishka[CancelInvitationHandler],
) -> CancelInvitationResult:
    """Cancel a pending invitation. Requires user:invite."""
    return await handler.run(CancelInvitation(organization_id=org_id, invitation_id=invitation_id))


@router.put("/members/{membership_id}/role", response_model=ChangeMemberRoleResult)
async def change_member_role(
    org_id: UUID,
    membership_id: UUID,
    body: ChangeRoleRequest,
    handler: FromDishka[ChangeMemberRoleHandler],
) -> ChangeMemberRoleResult:
    """Change a member's role. Requires user:update and a valid transition."""
    return await handler.run(
        ChangeMemberRole(organization_id=org_id, membership_id=membership_id, role=body.role)
    )


@router.delete("/members/{membership_id}", response_model=RemoveMemberResult)
async def remove_member(
    org_id: UUID,
    membership_id: UUID,
    handler: FromDishka[RemoveMemberHandler],
) -> RemoveMemberResult:
    """Deactivate a member. Requires user:delete."""
    return await handler.run(RemoveMember(organization_id=org_id, membership_id=membership_id))


@router.get("/members", response_model=MemberList)
async def list_members(
    org_id: UUID,
    handler: FromDishka[ListMembersHandler],
    status: MemberStatus = Query(MemberStatus.ACTIVE, description="Which members to include"),
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: int = Query(20, ge=1, le=100, description="Members per page"),
) -> MemberList:
    """Members of the organization and its pending invitations. Requires user:view."""
    return await handler.run(
        ListMembers(organization_id=org_id, status=status, page=page, limit=limit)
    )
