"""CancelInvitation command and handler."""

from datetime import datetime
from uuid import UUID

from trustee_portal.domain.auth.model.identity import Identity
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.value import InvitationId, OrganizationId
from trustee_portal.domain.membership.service.membership import MembershipService
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.authorization.policy import requires_permission
from trustee_portal.domain.shared.command import Command, CommandHandler, Result


class CancelInvitation(Command):
    organization_id: UUID
    invitation_id: UUID


class CancelInvitationResult(Result):
    id: str
    cancelled_at: datetime


class CancelInvitationHandler(CommandHandler[CancelInvitation, CancelInvitationResult]):
    __auth__ = requires_permission(Permission.USER_INVITE)
    identity: Identity
    membership_service: MembershipService

    async def run(self, cmd: CancelInvitation) -> CancelInvitationResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate

        invitation = await self.membership_service.cancel_invitation(
            actor=self.identity,
            organization_id=OrganizationId(cmd.organization_id),
            invitation_id=InvitationId(cmd.invitation_id),
        )

        assert invitation.cancelled_at is not None
        return CancelInvitationResult(id=str(invitation.id), cancelled_at=invitation.cancelled_at)
