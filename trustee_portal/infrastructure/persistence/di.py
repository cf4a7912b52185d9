from dishka import provide

from trustee_portal.domain.membership.port import (
    AuditLogRepository,
    InvitationRepository,
    MembershipRepository,
)
from trustee_portal.infrastructure.persistence.memory import (
    InMemoryAuditLogRepository,
    InMemoryInvitationRepository,
    InMemoryMembershipRepository,
)
from trustee_portal.util.di.base import Provider
from trustee_portal.util.di.scope import Scope


class PersistenceProvider(Provider):
    # APP-scoped stores: one set of tables per process
    membership_repo = provide(
        InMemoryMembershipRepository, scope=Scope.APP, provides=MembershipRepository
    )
    invitation_repo = provide(
        InMemoryInvitationRepository, scope=Scope.APP, provides=InvitationRepository
    )
    audit_repo = provide(InMemoryAuditLogRepository, scope=Scope.APP, provides=AuditLogRepository)
