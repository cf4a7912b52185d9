"""Handler-level authorization gates: public(), authorize() and organization scoping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from trustee_portal.domain.shared.error import AuthorizationError, ErrorCode

if TYPE_CHECKING:
    from trustee_portal.domain.auth.model.identity import Identity
    from trustee_portal.domain.auth.model.principal import Principal
    from trustee_portal.domain.auth.model.value import OrganizationId
    from trustee_portal.domain.shared.authorization.policy import Policy

logger = logging.getLogger("trustee_portal.authz")


@dataclass(frozen=True)
class Public:
    """No authentication required."""


_PUBLIC = Public()


def public() -> Public:
    """Mark a handler as publicly accessible (no auth required)."""
    return _PUBLIC


def authorize(identity: "Identity | None", policy: "Policy", *, target: str = "") -> "Principal":
    """Evaluate a policy for the caller and return the authenticated Principal.

    Raises:
        AuthorizationError: UNAUTHORIZED when the caller is not authenticated,
            otherwise the code carried by the policy's denial.
    """
    from trustee_portal.domain.auth.model.principal import Principal
    from trustee_portal.domain.auth.model.value import OrganizationId

    if not isinstance(identity, Principal):
        raise AuthorizationError("Authentication required", code=ErrorCode.UNAUTHORIZED)

    denial = policy.check(identity)
    if denial is not None:
        logger.warning(
            "Authorization denied: principal=%s role=%s target=%s code=%s",
            identity.user_id,
            identity.role,
            target,
            denial.code,
        )
        raise AuthorizationError(denial.message, code=denial.code)

    logger.info(
        "Authorization allowed: principal=%s role=%s target=%s",
        identity.user_id,
        identity.role,
        target,
    )
    return identity


def authorize_organization(principal: "Principal", organization_id: "OrganizationId") -> None:
    """Require the principal to be acting in ``organization_id``.

    Super administrators act in every organization; anyone else only in the
    organization their access token names.
    """
    if principal.is_super_admin or principal.organization_id == organization_id:
        return
    logger.warning(
        "Organization access denied: principal=%s token_org=%s target_org=%s",
        principal.user_id,
        principal.organization_id,
        organization_id,
    )
    raise AuthorizationError(
        "Organization membership required",
        code=ErrorCode.ORG_MEMBERSHIP_REQUIRED,
    )
