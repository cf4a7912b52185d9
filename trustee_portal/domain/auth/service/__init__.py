"""Auth domain services."""

from .token import TokenService

__all__ = ["TokenService"]
