"""DI provider for auth domain."""

import logging
from uuid import UUID

import jwt
from dishka import from_context, provide
from starlette.requests import Request

from trustee_portal.config import Config
from trustee_portal.domain.auth.model.identity import Anonymous, Identity
from trustee_portal.domain.auth.model.principal import Principal
from trustee_portal.domain.auth.model.value import OrganizationId, UserId
from trustee_portal.domain.auth.service.token import TokenService
from trustee_portal.domain.membership.port import MembershipRepository
from trustee_portal.domain.shared.error import AuthorizationError, ErrorCode
from trustee_portal.util.di.base import Provider
from trustee_portal.util.di.scope import Scope

logger = logging.getLogger(__name__)


def _bearer_token(request: Request) -> str | None:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    return auth_header[7:]  # Remove "Bearer " prefix


class AuthProvider(Provider):
    """DI provider for token handling and per-request identity."""

    request = from_context(provides=Request, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_token_service(self, config: Config) -> TokenService:
        return TokenService(_config=config.auth.jwt)

    @provide(scope=Scope.UOW)
    async def get_identity(
        self,
        request: Request,
        token_service: TokenService,
        membership_repo: MembershipRepository,
    ) -> Identity:
        """Resolve Identity from the bearer token plus a membership lookup.

        Returns Anonymous for missing or invalid tokens. A valid token for a
        user with no active membership in its organization yields a Principal
        without a member role.
        """
        token = _bearer_token(request)
        if token is None:
            return Anonymous()

        try:
            payload = token_service.validate_access_token(token)
            user_id = UserId(UUID(payload["sub"]))
            org_claim = payload.get("organization_id")
            organization_id = OrganizationId(UUID(org_claim)) if org_claim else None
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected access token: %s", e)
            return Anonymous()
        except (KeyError, ValueError) as e:
            logger.debug("Malformed access token claims: %s", e)
            return Anonymous()

        member_role = None
        if organization_id is not None:
            membership = await membership_repo.get_active(organization_id, user_id)
            if membership is not None:
                member_role = membership.role

        is_super_admin = payload.get("is_super_admin") is True
        logger.debug(
            "Identity resolved: user_id=%s org=%s role=%s super_admin=%s",
            user_id,
            organization_id,
            member_role,
            is_super_admin,
        )
        return Principal(
            user_id=user_id,
            is_super_admin=is_super_admin,
            organization_id=organization_id,
            member_role=member_role,
        )

    @provide(scope=Scope.UOW)
    def get_principal(self, identity: Identity) -> Principal:
        """Extract Principal from Identity. Raises if not authenticated."""
        if isinstance(identity, Principal):
            return identity
        raise AuthorizationError("Authentication required", code=ErrorCode.UNAUTHORIZED)
