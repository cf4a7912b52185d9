"""Invitation entity: an offer of membership sent to an email address."""

from datetime import UTC, datetime, timedelta

from pydantic import BaseModel

from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import InvitationId, OrganizationId, UserId


class Invitation(BaseModel):
    """A pending (or cancelled/expired) invitation to join an organization."""

    id: InvitationId
    organization_id: OrganizationId
    email: str
    role: Role
    invited_by: UserId
    invited_at: datetime
    expires_at: datetime
    department: str | None = None
    title: str | None = None
    cancelled_at: datetime | None = None

    @classmethod
    def create(
        cls,
        organization_id: OrganizationId,
        email: str,
        role: Role,
        invited_by: UserId,
        expires_in: timedelta,
        department: str | None = None,
        title: str | None = None,
    ) -> "Invitation":
        now = datetime.now(UTC)
        return cls(
            id=InvitationId.generate(),
            organization_id=organization_id,
            email=email.lower(),
            role=role,
            invited_by=invited_by,
            invited_at=now,
            expires_at=now + expires_in,
            department=department,
            title=title,
        )

    def is_pending(self, now: datetime | None = None) -> bool:
        """Not cancelled and not yet expired."""
        now = now or datetime.now(UTC)
        return self.cancelled_at is None and self.expires_at > now

    def cancelled(self) -> "Invitation":
        return self.model_copy(update={"cancelled_at": datetime.now(UTC)})
