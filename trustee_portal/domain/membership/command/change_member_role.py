"""ChangeMemberRole command and handler."""

from uuid import UUID

from trustee_portal.domain.auth.model.identity import Identity
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import MembershipId, OrganizationId
from trustee_portal.domain.membership.service.membership import MembershipService
from trustee_portal.domain.shared.authorization.permission import Permission
from trustee_portal.domain.shared.authorization.policy import requires_permission
from trustee_portal.domain.shared.command import Command, CommandHandler, Result


class ChangeMemberRole(Command):
    """Command to move an existing member to a different role."""

    organization_id: UUID
    membership_id: UUID
    role: Role


class ChangeMemberRoleResult(Result):
    id: str
    user_id: str
    previous_role: Role
    role: Role


class ChangeMemberRoleHandler(CommandHandler[ChangeMemberRole, ChangeMemberRoleResult]):
    __auth__ = requires_permission(Permission.USER_UPDATE)
    identity: Identity
    membership_service: MembershipService

    async def run(self, cmd: ChangeMemberRole) -> ChangeMemberRoleResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate

        member, previous_role = await self.membership_service.change_role(
            actor=self.identity,
            organization_id=OrganizationId(cmd.organization_id),
            membership_id=MembershipId(cmd.membership_id),
            new_role=cmd.role,
        )

        return ChangeMemberRoleResult(
            id=str(member.id),
            user_id=str(member.user_id),
            previous_role=previous_role,
            role=member.role,
        )
