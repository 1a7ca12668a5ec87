"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase
from asklet.application.usecase.views import UserView
from asklet.domain.service import JWTService, UserService
from asklet.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # Auth cookie value


class GetCurrentUserUseCase(BaseUseCase):
    """Resolves the auth cookie to the signed-in user's account.

    Unlike the other routes, which only need the user ID from the token,
    this reloads the user so that a token for a deleted account is caught.
    """

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserView:
        """Execute get current user flow.

        Raises:
            JWTError: If the token is invalid or expired
            NotFoundError: If the token's user no longer exists
        """
        claims = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_id(UserId(UUID(claims.user_id)))
        return UserView.from_domain(user)
