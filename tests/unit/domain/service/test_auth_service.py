"""Unit tests for AuthService and JWTService."""

from datetime import datetime, timedelta, timezone

import pytest

from asklet.config import AuthSettings
from asklet.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ValidationError,
)
from asklet.domain.repository import UserRepository
from asklet.domain.service import AuthService, JWTService
from asklet.util.jwt import (
    JWTError,
    TokenExpiredError,
    decode_auth_token,
    encode_auth_token,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        """The stored hash should not be the plain password."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await auth_service.register("carol", "Carol@Example.com", "secret1")

        # Assert
        stored = await user_repo.find_by_id(user.id)
        assert stored.email == "carol@example.com"
        assert stored.password_hash != "secret1"
        assert stored.password_hash.startswith("$2")
        assert stored.reputation == 0

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("carol", "carol@example.com", "secret1")

        with pytest.raises(BusinessRuleViolationError, match="User already exists"):
            await auth_service.register("carol2", "carol@example.com", "secret1")

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("carol", "carol@example.com", "secret1")

        with pytest.raises(BusinessRuleViolationError):
            await auth_service.register("carol", "other@example.com", "secret1")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("username", "email", "password", "message"),
        [
            ("", "a@example.com", "secret1", "All fields are required"),
            ("dave", "a@example.com", "123", "at least 6"),
            ("ab", "a@example.com", "secret1", "3-40"),
        ],
    )
    async def test_invalid_input_rejected(
        self, unit_env, username, email, password, message
    ):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match=message):
            await auth_service.register(username, email, password)


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_correct_password_returns_user(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user = await auth_service.register("erin", "erin@example.com", "hunter22")

        authenticated = await auth_service.authenticate("erin@example.com", "hunter22")

        assert authenticated.id == user.id

    @pytest.mark.asyncio
    async def test_wrong_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("erin", "erin@example.com", "hunter22")

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await auth_service.authenticate("erin@example.com", "wrong-one")

    @pytest.mark.asyncio
    async def test_unknown_email_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(AuthenticationError):
            await auth_service.authenticate("nobody@example.com", "whatever")

    @pytest.mark.asyncio
    async def test_missing_fields_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="Email and password required"):
            await auth_service.authenticate("", "")


class TestJWTService:
    """Tests for token round trips."""

    @pytest.mark.asyncio
    async def test_token_identifies_user(self, unit_env):
        jwt_service = await unit_env.get(JWTService)

        token = jwt_service.create_token("0b6c7f43-52a2-4b7e-9d43-0a7f0c1f1a11", "erin")

        assert jwt_service.get_user_id_from_token(token) == (
            "0b6c7f43-52a2-4b7e-9d43-0a7f0c1f1a11"
        )
        assert jwt_service.verify_token(token).username == "erin"

    @pytest.mark.asyncio
    async def test_garbage_token(self, unit_env):
        jwt_service = await unit_env.get(JWTService)

        assert jwt_service.get_user_id_from_token("not-a-jwt") is None
        assert jwt_service.get_user_id_from_token(None) is None
        with pytest.raises(JWTError):
            jwt_service.verify_token("not-a-jwt")

    def test_expired_token_rejected(self):
        settings = AuthSettings(
            jwt_secret="expired-token-secret-long-enough-hs256", jwt_expiry_days=1
        )
        token = encode_auth_token(
            "0b6c7f43-52a2-4b7e-9d43-0a7f0c1f1a11",
            "erin",
            settings,
            now=datetime.now(timezone.utc) - timedelta(days=2),
        )

        with pytest.raises(TokenExpiredError):
            decode_auth_token(token, settings)

    def test_token_signed_with_other_secret_rejected(self):
        token = encode_auth_token(
            "0b6c7f43-52a2-4b7e-9d43-0a7f0c1f1a11",
            "erin",
            AuthSettings(jwt_secret="one-secret-that-is-long-enough-for-hs256"),
        )

        with pytest.raises(JWTError):
            decode_auth_token(
                token, AuthSettings(jwt_secret="another-secret-long-enough-for-hs256")
            )
