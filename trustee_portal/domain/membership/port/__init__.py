"""Membership domain ports."""

from .repository import AuditLogRepository, InvitationRepository, MembershipRepository

__all__ = [
    "AuditLogRepository",
    "InvitationRepository",
    "MembershipRepository",
]
