"""InviteMember command and handler."""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr

from trustee_portal.domain.auth.model.identity import Identity
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import OrganizationId
from trustee_portal.domain.membership.service.membership import MembershipService
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.authorization.policy import requires_permission
from trustee_portal.domain.shared.command import Command, CommandHandler, Result


class InviteMember(Command):
    """Command to invite someone to an organization with a given role."""

    organization_id: UUID
    email: EmailStr
    role: Role
    department: str | None = None
    title: str | None = None


class InviteMemberResult(Result):
    id: str
    email: str
    role: Role
    department: str | None
    invited_at: datetime
    expires_at: datetime


class InviteMemberHandler(CommandHandler[InviteMember, InviteMemberResult]):
    __auth__ = requires_permission(Permission.USER_INVITE)
    identity: Identity
    membership_service: MembershipService

    async def run(self, cmd: InviteMember) -> InviteMemberResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate

        invitation = await self.membership_service.invite(
            actor=self.identity,
            organization_id=OrganizationId(cmd.organization_id),
            email=cmd.email,
            role=cmd.role,
            department=cmd.department,
            title=cmd.title,
        )

        return InviteMemberResult(
            id=str(invitation.id),
            email=invitation.email,
            role=invitation.role,
            department=invitation.department,
            invited_at=invitation.invited_at,
            expires_at=invitation.expires_at,
        )
