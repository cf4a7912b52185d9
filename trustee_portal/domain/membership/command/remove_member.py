"""RemoveMember command and handler."""

from uuid import UUID

from trustee_portal.domain.auth.model.identity import Identity
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.value import MembershipId, OrganizationId
from trustee_portal.domain.membership.service.membership import MembershipService
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.authorization.policy import requires_permission
from trustee_portal.domain.shared.command import Command, CommandHandler, Result


class RemoveMember(Command):
    organization_id: UUID
    membership_id: UUID


class RemoveMemberResult(Result):
    id: str
    user_id: str
    is_active: bool


class RemoveMemberHandler(CommandHandler[RemoveMember, RemoveMemberResult]):
    __auth__ = requires_permission(Permission.USER_DELETE)
    identity: Identity
    membership_service: MembershipService

    async def run(self, cmd: RemoveMember) -> RemoveMemberResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate

        member = await self.membership_service.remove_member(
            actor=self.identity,
            organization_id=OrganizationId(cmd.organization_id),
            membership_id=MembershipId(cmd.membership_id),
        )

        return RemoveMemberResult(
            id=str(member.id),
            user_id=str(member.user_id),
            is_active=member.is_active,
        )
