"""Repository ports for memberships, invitations and audit entries."""

from abc import abstractmethod
from typing import Protocol

from trustee_portal.domain.auth.model.value import (
    InvitationId,
    MembershipId,
    OrganizationId,
    UserId,
)
from trustee_portal.domain.membership.model import (
    AuditEntry,
    AuditFilter,
    Invitation,
    Membership,
)
from trustee_portal.domain.shared.port import Port


class MembershipRepository(Port, Protocol):
    """Repository for Membership persistence."""

    @abstractmethod
    async def get(self, membership_id: MembershipId) -> Membership | None:
        """Get a membership by id (active or not)."""
        ...

    @abstractmethod
    async def get_active(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Membership | None:
        """Get the user's active membership in an organization."""
        ...

    @abstractmethod
    async def find_active_by_email(
        self, organization_id: OrganizationId, email: str
    ) -> Membership | None:
        """Get the active membership for an email address (case-insensitive)."""
        ...

    @abstractmethod
    async def list_for_organization(
        self,
        organization_id: OrganizationId,
        *,
        is_active: bool | None = True,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Membership]:
        """Memberships in an organization, most recently joined first.

        ``is_active=None`` includes removed members.
        """
        ...

    @abstractmethod
    async def count(self, organization_id: OrganizationId, *, is_active: bool | None = True) -> int:
        ...

    @abstractmethod
    async def save(self, membership: Membership) -> None:
        """Insert or replace a membership."""
        ...


class InvitationRepository(Port, Protocol):
    """Repository for Invitation persistence."""

    @abstractmethod
    async def get(self, invitation_id: InvitationId) -> Invitation | None: ...

    @abstractmethod
    async def find_pending(
        self, organization_id: OrganizationId, email: str
    ) -> Invitation | None:
        """Get a pending (not cancelled, unexpired) invitation for an email."""
        ...

    @abstractmethod
    async def list_pending(self, organization_id: OrganizationId) -> list[Invitation]:
        """Pending invitations for an organization, newest first."""
        ...

    @abstractmethod
    async def save(self, invitation: Invitation) -> None: ...


class AuditLogRepository(Port, Protocol):
    """Append-only store of audit entries."""

    @abstractmethod
    async def append(self, entry: AuditEntry) -> None: ...

    @abstractmethod
    async def list_for_organization(self, organization_id: OrganizationId) -> list[AuditEntry]:
        """Entries for an organization, oldest first."""
        ...

    @abstractmethod
    async def search(
        self,
        organization_id: OrganizationId,
        criteria: AuditFilter,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[AuditEntry]:
        """Entries matching ``criteria``, newest first."""
        ...

    @abstractmethod
    async def count(self, organization_id: OrganizationId, criteria: AuditFilter) -> int: ...
