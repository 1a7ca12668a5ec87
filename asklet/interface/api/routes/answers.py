"""Answer routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from asklet.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from asklet.application.usecase.base import MessageResponse
from asklet.application.usecase.views import AnswerView
from asklet.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from asklet.domain.service import JWTService

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class UpdateAnswerAPIRequest(BaseModel):
    """API request for editing an answer."""

    content: str = ""


def _require_user(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def _not_found(e: NotFoundError) -> HTTPException:
    # A token whose user is gone is an authentication failure
    if e.resource == "User":
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Answer not found")


@router.post("/{answer_id}/accept", response_model=AcceptAnswerResponse)
async def accept_answer(
    answer_id: str,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptAnswerResponse:
    """Toggle acceptance of an answer.

    Only the author of the question may accept. Accepting an answer unaccepts
    any other accepted answer on the same question; accepting the accepted
    answer again unaccepts it.

    Args:
        answer_id: Answer UUID
        accept_answer_use_case: Accept answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Message and the answer's resulting acceptance state

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the question
            author, 404 if the answer or question does not exist
    """
    user_id = _require_user(jwt_service, auth_token, "accept answers")

    try:
        return await accept_answer_use_case.execute(
            AcceptAnswerRequest(answer_id=answer_id, user_id=user_id)
        )
    except NotAuthorizedError as e:
        logfire.warn("Accept forbidden", answer_id=answer_id, user_id=user_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Answer not found"
        )
    except Exception as e:
        logfire.error("Unexpected error accepting answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to accept answer",
        )


@router.put("/{answer_id}", response_model=AnswerView)
async def update_answer(
    answer_id: str,
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Edit an answer's content as its author or an admin.

    Raises:
        HTTPException: 401 if not authenticated, 400 if content is empty,
            403 if neither author nor admin, 404 if the answer does not exist
    """
    user_id = _require_user(jwt_service, auth_token, "edit answers")

    try:
        return await update_answer_use_case.execute(
            UpdateAnswerRequest(
                answer_id=answer_id, user_id=user_id, content=request.content
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotAuthorizedError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        logfire.error("Unexpected error updating answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update answer",
        )


@router.delete("/{answer_id}", response_model=MessageResponse)
async def delete_answer(
    answer_id: str,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Delete an answer as its author or an admin.

    Deleting the accepted answer leaves the question without one.

    Raises:
        HTTPException: 401 if not authenticated, 403 if neither author nor
            admin, 404 if the answer does not exist
    """
    user_id = _require_user(jwt_service, auth_token, "delete answers")

    try:
        return await delete_answer_use_case.execute(
            DeleteAnswerRequest(answer_id=answer_id, user_id=user_id)
        )
    except NotAuthorizedError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        logfire.error("Unexpected error deleting answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete answer",
        )
