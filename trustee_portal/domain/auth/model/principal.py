"""Principal: an authenticated identity with its tenant role, resolved per request."""

from dataclasses import dataclass

from trustee_portal.domain.auth.model.identity import Identity
from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import OrganizationId, UserId
from trustee_portal.domain.auth.service import rbac
from trustee_portal.domain.shared.authorization.permission import Permission


@dataclass(frozen=True)
class Principal(Identity):
    """The authenticated identity of the current requester.

    Resolved per-request from the access token plus a membership lookup for
    the active organization. ``member_role`` is None when the user has no
    active membership there. Platform super administrators carry the flag
    instead of (or as well as) a membership.
    """

    user_id: UserId
    is_super_admin: bool = False
    organization_id: OrganizationId | None = None
    member_role: Role | None = None

    @property
    def is_member(self) -> bool:
        return self.member_role is not None

    @property
    def role(self) -> Role | None:
        """Effective role: the platform flag wins over the membership role."""
        if self.is_super_admin:
            return Role.SUPER_ADMIN
        return self.member_role

    def has_permission(self, permission: Permission) -> bool:
        role = self.role
        return role is not None and rbac.has_permission(role, permission)

    def has_minimum_role(self, required: Role) -> bool:
        role = self.role
        return role is not None and rbac.has_minimum_role(role, required)

    def can_manage(self, target: Role) -> bool:
        role = self.role
        return role is not None and rbac.can_manage_role(role, target)
