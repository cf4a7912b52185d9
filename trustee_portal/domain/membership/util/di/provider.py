"""DI provider for membership domain."""

from dishka import provide

from trustee_portal.config import Config
from trustee_portal.domain.membership.command import (
    CancelInvitationHandler,
    ChangeMemberRoleHandler,
    InviteMemberHandler,
    RemoveMemberHandler,
)
from trustee_portal.domain.membership.port import (
    AuditLogRepository,
    InvitationRepository,
    MembershipRepository,
)
from trustee_portal.domain.membership.query import (
    GetAssignableRolesHandler,
    GetResourceHistoryHandler,
    GetRoleCatalogHandler,
    ListAuditLogHandler,
    ListMembersHandler,
)
from trustee_portal.domain.membership.service import MembershipService
from trustee_portal.util.di.base import Provider
from trustee_portal.util.di.scope import Scope


class MembershipProvider(Provider):
    """DI provider for membership services and handlers."""

    # Command Handlers
    invite_member_handler = provide(InviteMemberHandler, scope=Scope.UOW)
    cancel_invitation_handler = provide(CancelInvitationHandler, scope=Scope.UOW)
    change_member_role_handler = provide(ChangeMemberRoleHandler, scope=Scope.UOW)
    remove_member_handler = provide(RemoveMemberHandler, scope=Scope.UOW)

    # Query Handlers
    get_role_catalog_handler = provide(GetRoleCatalogHandler, scope=Scope.UOW)
    get_assignable_roles_handler = provide(GetAssignableRolesHandler, scope=Scope.UOW)
    list_members_handler = provide(ListMembersHandler, scope=Scope.UOW)
    list_audit_log_handler = provide(ListAuditLogHandler, scope=Scope.UOW)
    get_resource_history_handler = provide(GetResourceHistoryHandler, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_membership_service(
        self,
        config: Config,
        membership_repo: MembershipRepository,
        invitation_repo: InvitationRepository,
        audit_repo: AuditLogRepository,
    ) -> MembershipService:
        return MembershipService(
            _membership_repo=membership_repo,
            _invitation_repo=invitation_repo,
            _audit_repo=audit_repo,
            _config=config.invitations,
        )
