"""Token service for access token validation."""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from trustee_portal.config import JwtConfig
from trustee_portal.domain.auth.model.value import OrganizationId, UserId
from trustee_portal.domain.shared.service import Service


class TokenService(Service):
    """Encodes and validates HS256 access tokens.

    Claims the portal reads:
    - ``sub``: the user id
    - ``is_super_admin``: platform administrator flag (optional, default False)
    - ``organization_id``: the organization the session is acting in (optional)
    """

    _config: JwtConfig

    def create_access_token(
        self,
        user_id: UserId,
        organization_id: OrganizationId | None = None,
        is_super_admin: bool = False,
        expires_in: timedelta = timedelta(hours=1),
    ) -> str:
        """Create a signed access token.

        Production tokens are issued by the identity provider. This issues tokens
        with the same claims for local use.
        """
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "aud": self._config.audience,
            "iat": int(now.timestamp()),
            "exp": int((now + expires_in).timestamp()),
            "is_super_admin": is_super_admin,
        }
        if organization_id is not None:
            payload["organization_id"] = str(organization_id)

        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)

    def validate_access_token(self, token: str) -> dict[str, Any]:
        """Validate and decode an access token.

        Raises:
            jwt.InvalidTokenError: If the token is malformed, expired, or signed
                with another key
        """
        return jwt.decode(
            token,
            self._config.secret,
            algorithms=[self._config.algorithm],
            audience=self._config.audience,
            options={"require": ["sub", "exp"]},
        )
