"""Unit tests for the register, login and current-user use cases."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from asklet.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from asklet.domain.error import AuthenticationError, NotFoundError
from asklet.domain.service import JWTService
from asklet.util.jwt import JWTError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_registered_user(
        self, unit_env: AsyncContainer
    ):
        """Login should return a token that identifies the registered user."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        registered = await register.execute(
            RegisterRequest(username="frank", email="frank@example.com", password="pa55word")
        )

        # Act
        response = await login.execute(
            LoginRequest(email="FRANK@example.com", password="pa55word")
        )

        # Assert
        assert response.user.id == registered.user.id
        assert jwt_service.get_user_id_from_token(response.token) == registered.user.id
        assert registered.message == "User created successfully"

    @pytest.mark.asyncio
    async def test_login_with_wrong_password_fails(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(
            RegisterRequest(username="frank", email="frank@example.com", password="pa55word")
        )

        with pytest.raises(AuthenticationError):
            await login.execute(
                LoginRequest(email="frank@example.com", password="guessing")
            )

    @pytest.mark.asyncio
    async def test_register_view_hides_password_hash(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)

        response = await register.execute(
            RegisterRequest(username="grace", email="grace@example.com", password="pa55word")
        )

        body = response.model_dump(by_alias=True, mode="json")
        assert "passwordHash" not in body["user"]
        assert body["user"]["reputation"] == 0
        assert body["user"]["role"] == "user"


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_token_resolves_user(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        current = await unit_env.get(GetCurrentUserUseCase)
        await register.execute(
            RegisterRequest(username="heidi", email="heidi@example.com", password="pa55word")
        )
        token = (
            await login.execute(LoginRequest(email="heidi@example.com", password="pa55word"))
        ).token

        user = await current.execute(GetCurrentUserRequest(token=token))

        assert user.username == "heidi"

    @pytest.mark.asyncio
    async def test_token_for_deleted_user_not_found(self, unit_env: AsyncContainer):
        jwt_service = await unit_env.get(JWTService)
        current = await unit_env.get(GetCurrentUserUseCase)
        token = jwt_service.create_token(str(uuid4()), "ghost")

        with pytest.raises(NotFoundError):
            await current.execute(GetCurrentUserRequest(token=token))

    @pytest.mark.asyncio
    async def test_invalid_token_rejected(self, unit_env: AsyncContainer):
        current = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await current.execute(GetCurrentUserRequest(token="garbage"))
