"""List questions use case."""

import logfire
from pydantic import BaseModel, Field

from asklet.application.usecase.base import BaseUseCase, CamelModel
from asklet.application.usecase.views import Pagination, QuestionView
from asklet.domain.error import ValidationError
from asklet.domain.repository import QuestionSortOrder
from asklet.domain.service import AnswerService, QuestionService, UserService
from asklet.domain.value import TagName, Username


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    search: str | None = None
    tag: str | None = None
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    author: str | None = None  # Username


class ListQuestionsResponse(CamelModel):
    """List questions response."""

    questions: list[QuestionView]
    pagination: Pagination


class ListQuestionsUseCase(BaseUseCase):
    """Use case for browsing and searching questions."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        An unknown author yields an empty page rather than an error.
        """
        with logfire.span(
            "list_questions.execute",
            page=request.page,
            sort=request.sort.value,
            tag=request.tag,
            author=request.author,
        ):
            try:
                tag = TagName(request.tag) if request.tag else None
            except ValueError:
                raise ValidationError(f"Invalid tag: {request.tag!r}")

            author_id = None
            if request.author:
                try:
                    username = Username(request.author)
                except ValueError:
                    username = None
                author = (
                    await self.user_service.get_user_by_username(username)
                    if username
                    else None
                )
                if author is None:
                    return ListQuestionsResponse(
                        questions=[],
                        pagination=Pagination.build(request.page, request.limit, 0),
                    )
                author_id = author.id

            search = request.search.strip() if request.search else None

            questions, total = await self.question_service.list_questions(
                page=request.page,
                limit=request.limit,
                sort=request.sort,
                search=search or None,
                tag=tag,
                author_id=author_id,
            )
            answer_counts = await self.answer_service.count_for_questions(
                [q.id for q in questions]
            )
            authors = await self.user_service.get_users_by_ids(
                [q.author_id for q in questions]
            )

            return ListQuestionsResponse(
                questions=[
                    QuestionView.from_domain(
                        q, authors.get(q.author_id), answer_counts.get(q.id, 0)
                    )
                    for q in questions
                ],
                pagination=Pagination.build(request.page, request.limit, total),
            )
