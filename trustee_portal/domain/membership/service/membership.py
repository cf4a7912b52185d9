"""Membership service: invitations, role changes and removals within an organization."""

import logging
from datetime import timedelta

from trustee_portal.config import InvitationConfig
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import InvitationId, MembershipId, OrganizationId
from trustee_portal.domain.auth.service import rbac
from trustee_portal.domain.membership.model import (
    AuditAction,
    AuditEntry,
    Invitation,
    Membership,
)
from trustee_portal.domain.membership.port import (
    AuditLogRepository,
    InvitationRepository,
    MembershipRepository,
)
from trustee_portal.domain.shared.error import (
    AuthorizationError,
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from trustee_portal.domain.shared.service import Service

logger = logging.getLogger(__name__)


class MembershipService(Service):
    """Applies the role rules to membership changes and records an audit trail.

    Every operation takes the acting Principal. Handler gates have already
    checked the coarse permission (``user:invite``, ``user:update`` ...); the
    checks here are the ones that depend on the target: which role is being
    granted, whose membership is being touched, and organization limits.
    """

    _membership_repo: MembershipRepository
    _invitation_repo: InvitationRepository
    _audit_repo: AuditLogRepository
    _config: InvitationConfig

    async def invite(
        self,
        actor: Principal,
        organization_id: OrganizationId,
        email: str,
        role: Role,
        department: str | None = None,
        title: str | None = None,
    ) -> Invitation:
        actor_role = self._acting_role(actor, organization_id)
        email = email.strip().lower()

        if role not in rbac.get_invitable_roles(actor_role):
            raise AuthorizationError(
                f"Cannot invite users with role '{role}'",
                code=ErrorCode.INSUFFICIENT_ROLE,
            )

        member_count = await self._membership_repo.count(organization_id)
        if member_count >= self._config.max_members:
            raise AuthorizationError(
                "Organization has reached the maximum member limit",
                code=ErrorCode.MEMBER_LIMIT_REACHED,
            )

        if await self._membership_repo.find_active_by_email(organization_id, email):
            raise ConflictError(
                "This user is already a member of the organization",
                code=ErrorCode.ALREADY_MEMBER,
            )

        if await self._invitation_repo.find_pending(organization_id, email):
            raise ConflictError(
                "An invitation is already pending for this email",
                code=ErrorCode.INVITATION_PENDING,
            )

        invitation = Invitation.create(
            organization_id=organization_id,
            email=email,
            role=role,
            invited_by=actor.user_id,
            expires_in=timedelta(days=self._config.expire_days),
            department=department,
            title=title,
        )
        await self._invitation_repo.save(invitation)

        await self._audit(
            actor,
            organization_id,
            AuditAction.INVITE,
            "invitation",
            str(invitation.id),
            {"email": email, "role": str(role), "department": department},
        )
        logger.info(
            "Invitation created: org=%s email=%s role=%s by=%s",
            organization_id,
            email,
            role,
            actor.user_id,
        )
        return invitation

    async def cancel_invitation(
        self,
        actor: Principal,
        organization_id: OrganizationId,
        invitation_id: InvitationId,
    ) -> Invitation:
        actor_role = self._acting_role(actor, organization_id)

        invitation = await self._invitation_repo.get(invitation_id)
        if invitation is None or invitation.organization_id != organization_id:
            raise NotFoundError(f"Invitation not found: {invitation_id}")

        if invitation.invited_by != actor.user_id and not rbac.can_manage_role(
            actor_role, invitation.role
        ):
            raise AuthorizationError(
                "Cannot cancel an invitation for a role you cannot manage",
                code=ErrorCode.INSUFFICIENT_ROLE,
            )

        cancelled = invitation.cancelled()
        await self._invitation_repo.save(cancelled)

        await self._audit(
            actor,
            organization_id,
            AuditAction.INVITATION_CANCEL,
            "invitation",
            str(invitation.id),
            {"email": invitation.email, "role": str(invitation.role)},
        )
        logger.info("Invitation cancelled: id=%s by=%s", invitation.id, actor.user_id)
        return cancelled

    async def change_role(
        self,
        actor: Principal,
        organization_id: OrganizationId,
        membership_id: MembershipId,
        new_role: Role,
    ) -> tuple[Membership, Role]:
        """Move a member to ``new_role``; returns the updated member and the role it left."""
        actor_role = self._acting_role(actor, organization_id)
        target = await self._get_active_member(organization_id, membership_id)

        if target.user_id == actor.user_id:
            raise ValidationError(
                "Cannot change your own role. Transfer ownership first.",
                field="role",
                code=ErrorCode.CANNOT_MODIFY_SELF,
            )

        transition = rbac.can_transition_role(target.role, new_role, actor_role)
        if not transition.valid:
            raise AuthorizationError(
                transition.reason or "Invalid role transition",
                code=ErrorCode.INVALID_ROLE_TRANSITION,
            )

        updated = target.with_role(new_role)
        await self._membership_repo.save(updated)

        await self._audit(
            actor,
            organization_id,
            AuditAction.ROLE_CHANGE,
            "organization_member",
            str(target.id),
            {
                "target_user_id": str(target.user_id),
                "previous_role": str(target.role),
                "new_role": str(new_role),
            },
        )
        logger.info(
            "Role changed: member=%s %s -> %s by=%s",
            target.id,
            target.role,
            new_role,
            actor.user_id,
        )
        return updated, target.role

    async def remove_member(
        self,
        actor: Principal,
        organization_id: OrganizationId,
        membership_id: MembershipId,
    ) -> Membership:
        actor_role = self._acting_role(actor, organization_id)
        target = await self._get_active_member(organization_id, membership_id)

        if target.user_id == actor.user_id:
            raise ValidationError(
                "Cannot remove yourself. Transfer ownership first.",
                code=ErrorCode.CANNOT_REMOVE_SELF,
            )

        if not rbac.can_manage_role(actor_role, target.role):
            raise AuthorizationError(
                f"Cannot remove a member with role '{target.role}'",
                code=ErrorCode.INSUFFICIENT_ROLE,
            )

        removed = target.deactivated()
        await self._membership_repo.save(removed)

        await self._audit(
            actor,
            organization_id,
            AuditAction.MEMBER_REMOVE,
            "organization_member",
            str(target.id),
            {"target_user_id": str(target.user_id), "role": str(target.role)},
        )
        logger.info("Member removed: member=%s by=%s", target.id, actor.user_id)
        return removed

    def _acting_role(self, actor: Principal, organization_id: OrganizationId) -> Role:
        """The role the actor holds in ``organization_id``.

        Super administrators act everywhere; everyone else only within the
        organization their membership was resolved for.
        """
        if actor.is_super_admin:
            return Role.SUPER_ADMIN
        if actor.member_role is None or actor.organization_id != organization_id:
            raise AuthorizationError(
                "Organization membership required",
                code=ErrorCode.ORG_MEMBERSHIP_REQUIRED,
            )
        return actor.member_role

    async def _get_active_member(
        self, organization_id: OrganizationId, membership_id: MembershipId
    ) -> Membership:
        member = await self._membership_repo.get(membership_id)
        if member is None or member.organization_id != organization_id or not member.is_active:
            raise NotFoundError(f"Member not found: {membership_id}")
        return member

    async def _audit(
        self,
        actor: Principal,
        organization_id: OrganizationId,
        action: AuditAction,
        resource_type: str,
        resource_id: str,
        details: dict,
    ) -> None:
        await self._audit_repo.append(
            AuditEntry.record(
                organization_id=organization_id,
                user_id=actor.user_id,
                action=action,
                resource_type=resource_type,
                resource_id=resource_id,
                details=details,
            )
        )
