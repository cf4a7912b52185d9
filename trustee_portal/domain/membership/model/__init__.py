"""Membership domain models."""

from .audit import AuditAction, AuditEntry, AuditFilter
from .invitation import Invitation
from .membership import Membership

__all__ = [
    "AuditAction",
    "AuditEntry",
    "AuditFilter",
    "Invitation",
    "Membership",
]
