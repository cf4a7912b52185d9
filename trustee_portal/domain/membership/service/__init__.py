"""Membership domain services."""

from .membership import MembershipService

__all__ = ["MembershipService"]
