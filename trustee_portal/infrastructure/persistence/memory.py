"""In-memory repository adapters.

State lives for the lifetime of the process. Writes are serialized by a
per-store asyncio lock; reads take no lock.
"""

import asyncio
from datetime import UTC, datetime
from typing import TypeVar

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
from trustee_portal.domain.membership.port import (
    AuditLogRepository,
    InvitationRepository,
    MembershipRepository,
)

T = TypeVar("T")


def _page(rows: list[T], limit: int | None, offset: int | None) -> list[T]:
    start = offset or 0
    return rows[start:] if limit is None else rows[start : start + limit]


class InMemoryMembershipRepository(MembershipRepository):
    def __init__(self) -> None:
        self._rows: dict[MembershipId, Membership] = {}
        self._lock = asyncio.Lock()

    async def get(self, membership_id: MembershipId) -> Membership | None:
        return self._rows.get(membership_id)

    async def get_active(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Membership | None:
        return next(
            (
                m
                for m in self._rows.values()
                if m.is_active and m.organization_id == organization_id and m.user_id == user_id
            ),
            None,
        )

    async def find_active_by_email(
        self, organization_id: OrganizationId, email: str
    ) -> Membership | None:
        email = email.lower()
        return next(
            (
                m
                for m in self._rows.values()
                if m.is_active and m.organization_id == organization_id and m.email == email
            ),
            None,
        )

    def _select(self, organization_id: OrganizationId, is_active: bool | None) -> list[Membership]:
        return [
            m
            for m in self._rows.values()
            if m.organization_id == organization_id
            and (is_active is None or m.is_active == is_active)
        ]

    async def list_for_organization(
        self,
        organization_id: OrganizationId,
        *,
        is_active: bool | None = True,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Membership]:
        rows = sorted(
            self._select(organization_id, is_active), key=lambda m: m.joined_at, reverse=True
        )
        return _page(rows, limit, offset)

    async def count(self, organization_id: OrganizationId, *, is_active: bool | None = True) -> int:
        return len(self._select(organization_id, is_active))

    async def save(self, membership: Membership) -> None:
        async with self._lock:
            self._rows[membership.id] = membership


class InMemoryInvitationRepository(InvitationRepository):
    def __init__(self) -> None:
        self._rows: dict[InvitationId, Invitation] = {}
        self._lock = asyncio.Lock()

    async def get(self, invitation_id: InvitationId) -> Invitation | None:
        return self._rows.get(invitation_id)

    async def find_pending(
        self, organization_id: OrganizationId, email: str
    ) -> Invitation | None:
        email = email.lower()
        return next(
            (inv for inv in await self.list_pending(organization_id) if inv.email == email),
            None,
        )

    async def list_pending(self, organization_id: OrganizationId) -> list[Invitation]:
        now = datetime.now(UTC)
        pending = [
            inv
            for inv in self._rows.values()
            if inv.organization_id == organization_id and inv.is_pending(now)
        ]
        return sorted(pending, key=lambda inv: inv.invited_at, reverse=True)

    async def save(self, invitation: Invitation) -> None:
        async with self._lock:
            self._rows[invitation.id] = invitation


class InMemoryAuditLogRepository(AuditLogRepository):
    def __init__(self) -> None:
        self._entries: list[AuditEntry] = []
        self._lock = asyncio.Lock()

    async def append(self, entry: AuditEntry) -> None:
        async with self._lock:
            self._entries.append(entry)

    async def list_for_organization(self, organization_id: OrganizationId) -> list[AuditEntry]:
        return [e for e in self._entries if e.organization_id == organization_id]

    def _matching(self, organization_id: OrganizationId, criteria: AuditFilter) -> list[AuditEntry]:
        return [
            e
            for e in self._entries
            if e.organization_id == organization_id and criteria.matches(e)
        ]

    async def search(
        self,
        organization_id: OrganizationId,
        criteria: AuditFilter,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[AuditEntry]:
        # Appended in time order, so reversing gives newest first
        return _page(self._matching(organization_id, criteria)[::-1], limit, offset)

    async def count(self, organization_id: OrganizationId, criteria: AuditFilter) -> int:
        return len(self._matching(organization_id, criteria))
