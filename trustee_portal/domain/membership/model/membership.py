"""Membership entity: a user's role within one organization."""

from datetime import UTC, datetime

from pydantic import BaseModel

from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import MembershipId, OrganizationId, UserId


class Membership(BaseModel):
    """Association between a user and an organization, carrying their role.

    Removal is a soft delete: ``is_active`` goes False and the row stays for
    the audit trail.
    """

    id: MembershipId
    organization_id: OrganizationId
    user_id: UserId
    email: str
    role: Role
    is_active: bool = True
    department: str | None = None
    title: str | None = None
    joined_at: datetime

    @classmethod
    def create(
        cls,
        organization_id: OrganizationId,
        user_id: UserId,
        email: str,
        role: Role,
        department: str | None = None,
        title: str | None = None,
    ) -> "Membership":
        return cls(
            id=MembershipId.generate(),
            organization_id=organization_id,
            user_id=user_id,
            email=email.lower(),
            role=role,
            department=department,
            title=title,
            joined_at=datetime.now(UTC),
        )

    def with_role(self, role: Role) -> "Membership":
        return self.model_copy(update={"role": role})

    def deactivated(self) -> "Membership":
        return self.model_copy(update={"is_active": False})
