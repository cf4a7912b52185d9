"""Error hierarchy for the Trustee Portal.

Error layers:
- PortalError: Base class for all portal errors
- DomainError: Business rule violations, authorization denials (4xx responses)
- InfrastructureError: System-level failures like storage/config issues (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable machine-readable error codes surfaced to API clients."""

    # Authentication / authorization
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    ORG_MEMBERSHIP_REQUIRED = "ORG_MEMBERSHIP_REQUIRED"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"
    INSUFFICIENT_ROLE = "INSUFFICIENT_ROLE"
    OWNER_REQUIRED = "OWNER_REQUIRED"
    SUPER_ADMIN_REQUIRED = "SUPER_ADMIN_REQUIRED"
    INVALID_ROLE_TRANSITION = "INVALID_ROLE_TRANSITION"

    # Membership rules
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ALREADY_MEMBER = "ALREADY_MEMBER"
    INVITATION_PENDING = "INVITATION_PENDING"
    MEMBER_LIMIT_REACHED = "MEMBER_LIMIT_REACHED"
    CANNOT_MODIFY_SELF = "CANNOT_MODIFY_SELF"
    CANNOT_REMOVE_SELF = "CANNOT_REMOVE_SELF"

    # System
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class PortalError(Exception):
    """Base class for all portal errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(PortalError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, code=code or ErrorCode.NOT_FOUND)


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message, code=code or ErrorCode.VALIDATION_ERROR)
        self.field = field


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class ConflictError(DomainError):
    """Resource already exists or version conflict."""


class AuthorizationError(DomainError):
    """Caller not authenticated, or not authorized for this operation."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, code=code or ErrorCode.FORBIDDEN)


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(PortalError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, code=code or ErrorCode.CONFIGURATION_ERROR)
