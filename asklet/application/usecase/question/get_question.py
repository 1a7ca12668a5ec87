"""Get question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, CamelModel, parse_resource_id
from asklet.application.usecase.views import AnswerView, QuestionView
from asklet.domain.service import AnswerService, QuestionService, UserService
from asklet.domain.value import QuestionId, UserId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetQuestionResponse(CamelModel):
    """Question with its answers."""

    question: QuestionView
    answers: list[AnswerView]


class GetQuestionUseCase(BaseUseCase):
    """Use case for viewing a question page.

    Counts a view, then returns the question with its answers ordered
    accepted first and oldest first after that.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(parse_resource_id(request.question_id, "Question"))
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        with logfire.span("get_question.execute", question_id=str(question_id)):
            question = await self.question_service.get_question(question_id)
            await self.question_service.record_view(question_id)
            question = question.model_copy(update={"views": question.views + 1})

            answers = await self.answer_service.list_for_question(question_id)
            authors = await self.user_service.get_users_by_ids(
                [question.author_id] + [a.author_id for a in answers]
            )

            return GetQuestionResponse(
                question=QuestionView.from_domain(
                    question,
                    authors.get(question.author_id),
                    answer_count=len(answers),
                    viewer_id=viewer_id,
                ),
                answers=[
                    AnswerView.from_domain(a, authors.get(a.author_id), viewer_id)
                    for a in answers
                ],
            )
