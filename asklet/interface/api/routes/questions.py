"""Question and answer-on-question routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from asklet.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from asklet.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from asklet.application.usecase.base import MessageResponse
from asklet.application.usecase.views import AnswerView, QuestionView
from asklet.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from asklet.domain.repository import QuestionSortOrder
from asklet.domain.service import JWTService

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question; omitted fields are kept."""

    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str = ""


def _not_found(e: NotFoundError) -> HTTPException:
    # A token whose user is gone is an authentication failure
    if e.resource == "User":
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Question not found"
    )


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    search: str | None = None,
    tag: str | None = None,
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
    author: str | None = None,
) -> ListQuestionsResponse:
    """List questions with pagination, search and filters.

    Args:
        list_questions_use_case: List questions use case from DI
        page: 1-based page number
        limit: Page size (max 100)
        search: Case-insensitive substring matched against title and description
        tag: Only questions carrying this tag
        sort: newest, oldest, views or votes
        author: Only questions asked by this username

    Returns:
        Page of questions with pagination metadata
    """
    try:
        return await list_questions_use_case.execute(
            ListQuestionsRequest(
                page=page,
                limit=limit,
                search=search,
                tag=tag,
                sort=sort,
                author=author,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("", response_model=QuestionView, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Ask a new question.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 400 if validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to ask a question",
        )

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                description=request.description,
                tags=request.tags,
                author_id=user_id,
            )
        )
    except ValidationError as e:
        logfire.warn("Question creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        # Token for a user that no longer exists
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create question",
        )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Get a question with its answers and count the view.

    Authentication is optional; when present the caller's votes are included.

    Raises:
        HTTPException: 404 if the question does not exist
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(question_id=question_id, viewer_id=viewer_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Question not found"
        )


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: str,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListAnswersResponse:
    """List the answers to a question, accepted answer first.

    Raises:
        HTTPException: 404 if the question does not exist
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        return await list_answers_use_case.execute(
            ListAnswersRequest(question_id=question_id, viewer_id=viewer_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Question not found"
        )


@router.post(
    "/{question_id}/answers",
    response_model=AnswerView,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: str,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Answer a question.

    Requires authentication. The question author is notified unless they
    answered their own question.

    Raises:
        HTTPException: 401 if not authenticated, 400 if content is empty,
            404 if the question does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to answer",
        )

    try:
        return await create_answer_use_case.execute(
            CreateAnswerRequest(
                question_id=question_id,
                content=request.content,
                author_id=user_id,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        logfire.warn("Answer target not found", question_id=question_id, error=str(e))
        raise _not_found(e)
    except Exception as e:
        logfire.error("Unexpected error creating answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create answer",
        )


@router.put("/{question_id}", response_model=QuestionView)
async def update_question(
    question_id: str,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Edit a question as its author or an admin.

    Raises:
        HTTPException: 401 if not authenticated, 400 if validation fails,
            403 if neither author nor admin, 404 if the question does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to edit questions",
        )

    try:
        return await update_question_use_case.execute(
            UpdateQuestionRequest(
                question_id=question_id,
                user_id=user_id,
                title=request.title,
                description=request.description,
                tags=request.tags,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotAuthorizedError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        logfire.error("Unexpected error updating question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update question",
        )


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: str,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Delete a question and all of its answers as its author or an admin.

    Raises:
        HTTPException: 401 if not authenticated, 403 if neither author nor
            admin, 404 if the question does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete questions",
        )

    try:
        return await delete_question_use_case.execute(
            DeleteQuestionRequest(question_id=question_id, user_id=user_id)
        )
    except NotAuthorizedError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        logfire.error("Unexpected error deleting question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete question",
        )
