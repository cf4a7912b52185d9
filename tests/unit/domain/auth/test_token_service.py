"""Tests for TokenService."""

from datetime import timedelta

import jwt
import pytest

from trustee_portal.config import JwtConfig
from trustee_portal.domain.auth.model.value import OrganizationId, UserId
from trustee_portal.domain.auth.service.token import TokenService

SECRET = "test-secret-for-unit-tests-min-32"


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(_config=JwtConfig(secret=SECRET))


class TestValidateAccessToken:
    def test_round_trips_claims(self, token_service: TokenService) -> None:
        user_id = UserId.generate()
        org_id = OrganizationId.generate()
        token = token_service.create_access_token(user_id, organization_id=org_id)

        payload = token_service.validate_access_token(token)

        assert payload["sub"] == str(user_id)
        assert payload["organization_id"] == str(org_id)
        assert payload["is_super_admin"] is False

    def test_organization_claim_is_optional(self, token_service: TokenService) -> None:
        token = token_service.create_access_token(UserId.generate(), is_super_admin=True)
        payload = token_service.validate_access_token(token)
        assert "organization_id" not in payload
        assert payload["is_super_admin"] is True

    def test_expired_token_rejected(self, token_service: TokenService) -> None:
        token = token_service.create_access_token(
            UserId.generate(), expires_in=timedelta(seconds=-10)
        )
        with pytest.raises(jwt.ExpiredSignatureError):
            token_service.validate_access_token(token)

    def test_wrong_secret_rejected(self, token_service: TokenService) -> None:
        other = TokenService(_config=JwtConfig(secret="another-secret-for-unit-tests-32"))
        token = other.create_access_token(UserId.generate())
        with pytest.raises(jwt.InvalidTokenError):
            token_service.validate_access_token(token)

    def test_wrong_audience_rejected(self, token_service: TokenService) -> None:
        other = TokenService(_config=JwtConfig(secret=SECRET, audience="somebody-else"))
        token = other.create_access_token(UserId.generate())
        with pytest.raises(jwt.InvalidAudienceError):
            token_service.validate_access_token(token)

    def test_garbage_rejected(self, token_service: TokenService) -> None:
        with pytest.raises(jwt.InvalidTokenError):
            token_service.validate_access_token("not-a-token")
