"""Membership domain commands."""

from .cancel_invitation import CancelInvitation, CancelInvitationHandler, CancelInvitationResult
from .change_member_role import ChangeMemberRole, ChangeMemberRoleHandler, ChangeMemberRoleResult
from .invite_member import InviteMember, InviteMemberHandler, InviteMemberResult
from .remove_member import RemoveMember, RemoveMemberHandler, RemoveMemberResult

__all__ = [
    "CancelInvitation",
    "CancelInvitationHandler",
    "CancelInvitationResult",
    "ChangeMemberRole",
    "ChangeMemberRoleHandler",
    "ChangeMemberRoleResult",
    "InviteMember",
    "InviteMemberHandler",
    "InviteMemberResult",
    "RemoveMember",
    "RemoveMemberHandler",
    "RemoveMemberResult",
]
