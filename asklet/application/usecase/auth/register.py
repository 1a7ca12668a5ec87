"""Register use case."""

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, CamelModel
from asklet.application.usecase.views import UserView
from asklet.domain.service import AuthService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str = ""
    email: str = ""
    password: str = ""


class RegisterResponse(CamelModel):
    """Register response."""

    message: str
    user: UserView


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account with email and password."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Raises:
            ValidationError: If a field is missing or invalid
            BusinessRuleViolationError: If the user already exists
        """
        user = await self.auth_service.register(
            request.username, request.email, request.password
        )
        return RegisterResponse(
            message="User created successfully", user=UserView.from_domain(user)
        )
