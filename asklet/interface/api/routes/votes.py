"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from asklet.application.usecase.base import CamelModel
from asklet.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteStateRequest,
    GetVoteStateUseCase,
    VoteStateResponse,
)
from asklet.domain.error import ConcurrentUpdateError, NotFoundError, ValidationError
from asklet.domain.service import JWTService

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(CamelModel):
    """API request for voting (``{itemId, itemType, voteType}``)."""

    item_id: str | None = None
    item_type: str | None = None
    vote_type: str | None = None


@router.get("/vote", response_model=VoteStateResponse)
async def get_vote_state(
    get_vote_state_use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    item_id: str | None = Query(default=None, alias="itemId"),
    item_type: str | None = Query(default=None, alias="itemType"),
    auth_token: str | None = Cookie(default=None),
) -> VoteStateResponse:
    """Get the tallies of a question or answer and the caller's vote.

    Authentication is optional; without it ``userVote`` is null.

    Raises:
        HTTPException: 400 on missing or malformed input, 404 if the item
            does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        return await get_vote_state_use_case.execute(
            GetVoteStateRequest(item_id=item_id, item_type=item_type, user_id=user_id)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/vote", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote up or down on a question or answer.

    Repeating the caller's current vote removes it; the opposite direction
    switches it.

    Requires authentication.

    Args:
        request: Item ID, item type and vote direction
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated tallies and the caller's resulting vote

    Raises:
        HTTPException: 401 if not authenticated, 400 on invalid input or
            self-votes, 404 if the item does not exist, 409 if concurrent
            votes kept conflicting
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                item_id=request.item_id,
                item_type=request.item_type,
                vote_type=request.vote_type,
                user_id=user_id,
            )
        )
    except ValidationError as e:
        logfire.warn("Vote rejected", error=str(e), user_id=user_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConcurrentUpdateError as e:
        logfire.warn("Vote conflict", error=str(e), attempts=e.attempts)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Vote conflicted with concurrent updates, please retry",
        )
    except Exception as e:
        logfire.error("Unexpected error casting vote", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process vote",
        )
