from .provider import MembershipProvider

__all__ = ["MembershipProvider"]
