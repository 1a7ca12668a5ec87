"""Login use case."""

import logfire
from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase
from asklet.application.usecase.views import UserView
from asklet.domain.service import AuthService, JWTService


class LoginRequest(BaseModel):
    """Login request."""

    email: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: UserView


class LoginUseCase(BaseUseCase):
    """Use case for email/password login.

    Checks the credentials and issues a JWT for the auth cookie.
    """

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            ValidationError: If email or password is missing
            AuthenticationError: If the credentials don't match
        """
        with logfire.span("login.execute"):
            user = await self.auth_service.authenticate(request.email, request.password)
            token = self.jwt_service.create_token(str(user.id), user.username.root)
            return LoginResponse(token=token, user=UserView.from_domain(user))
