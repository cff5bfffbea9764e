"""Unit tests for JWTAuthProvider."""

from uuid import uuid4

import pytest
from jose import jwt as jose_jwt

from domain.entities.account import Account
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_hs256_token(payload: dict, secret: str = "test-secret") -> str:
    """Create an HS256-signed JWT with a given payload."""
    return jose_jwt.encode(payload, secret, algorithm="HS256")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hs256_provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)


# ---------------------------------------------------------------------------
# Tests: validate_token returns None for missing claims
# ---------------------------------------------------------------------------


class TestValidateTokenMissingClaims:
    """validate_token should return None when the decoded payload is missing
    the required 'sub' or 'email' claims."""

    async def test_should_return_none_when_token_has_no_sub_claim(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token({"email": "user@example.com", "exp": 9999999999})

        assert await hs256_provider.validate_token(token) is None

    async def test_should_return_none_when_token_has_no_email_claim(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token({"sub": uuid4().hex, "exp": 9999999999})

        assert await hs256_provider.validate_token(token) is None

    async def test_should_return_none_when_token_has_empty_email(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token({"sub": uuid4().hex, "email": "", "exp": 9999999999})

        assert await hs256_provider.validate_token(token) is None


# ---------------------------------------------------------------------------
# Tests: signature and round trip
# ---------------------------------------------------------------------------


class TestTokenRoundTrip:
    async def test_should_reject_token_signed_with_another_secret(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token(
            {"sub": "a", "email": "user@example.com", "exp": 9999999999}, secret="other"
        )

        assert await hs256_provider.validate_token(token) is None

    async def test_should_carry_email_and_token_id(self, hs256_provider: JWTAuthProvider):
        token = hs256_provider.create_token(TokenUser(id="acc-1", email="user@example.com"))

        user = await hs256_provider.validate_token(token)

        assert user is not None
        assert user.id == "acc-1"
        assert user.email == "user@example.com"
        assert user.current_email() == "user@example.com"
        assert user.token_id

    async def test_should_keep_a_given_token_id(self, hs256_provider: JWTAuthProvider):
        token = hs256_provider.create_token(
            TokenUser(id="acc-1", email="user@example.com", token_id="fixed-jti")
        )

        user = await hs256_provider.validate_token(token)

        assert user is not None
        assert user.token_id == "fixed-jti"

    async def test_should_mint_distinct_token_ids(self, hs256_provider: JWTAuthProvider):
        user = TokenUser(id="acc-1", email="user@example.com")

        first = await hs256_provider.validate_token(hs256_provider.create_token(user))
        second = await hs256_provider.validate_token(hs256_provider.create_token(user))

        assert first is not None and second is not None
        assert first.token_id != second.token_id


# ---------------------------------------------------------------------------
# Tests: issue
# ---------------------------------------------------------------------------


class TestIssue:
    async def test_should_issue_session_for_account(self, hs256_provider: JWTAuthProvider):
        issued = hs256_provider.issue(
            Account(id="acc-1", email="user@example.com", password_hash="x")
        )

        assert issued.email == "user@example.com"
        assert issued.token_type == "bearer"
        assert issued.expires_in == 30 * 60
        user = await hs256_provider.validate_token(issued.access_token)
        assert user is not None
        assert user.id == "acc-1"

    def test_should_store_configuration(self):
        provider = JWTAuthProvider(secret_key="my-secret", algorithm="HS256", expire_minutes=15)

        assert provider._algorithm == "HS256"
        assert provider._secret_key == "my-secret"
        assert provider._expire_minutes == 15
