"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from asklet.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from asklet.domain.error import NotFoundError

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{username}", response_model=GetUserProfileResponse)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile.

    Returns the user, their question/answer/accepted counts and reputation,
    and their most recent questions and answers.

    Raises:
        HTTPException: 404 if no user has this username
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(username=username)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
