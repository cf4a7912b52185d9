"""Centralized error transformation for API routes.

Maps portal errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from trustee_portal.domain.shared.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    ErrorCode,
    InfrastructureError,
    InvalidStateError,
    NotFoundError,
    PortalError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
    InvalidStateError: 409,
    ConflictError: 409,
    AuthorizationError: 403,
}


def map_error(error: PortalError) -> HTTPException:
    """Map a portal error to an HTTPException whose detail is ``{code, message}``."""
    detail: dict[str, Any] = {
        "code": str(error.code),
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        # Distinguish 401 (unauthenticated) from 403 (unauthorized)
        if isinstance(error, AuthorizationError) and error.code == ErrorCode.UNAUTHORIZED:
            return HTTPException(
                status_code=401,
                detail=detail,
                headers={"WWW-Authenticate": "Bearer"},
            )
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown PortalError subclasses
    return HTTPException(status_code=500, detail=detail)


def error_body(detail: dict[str, Any]) -> dict[str, Any]:
    """Response envelope for failed requests."""
    return {"success": False, "error": detail}
