"""List answers use case."""

from uuid import UUID

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, CamelModel, parse_resource_id
from asklet.application.usecase.views import AnswerView
from asklet.domain.service import AnswerService, QuestionService, UserService
from asklet.domain.value import QuestionId, UserId


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str
    viewer_id: str | None = None


class ListAnswersResponse(CamelModel):
    """List answers response."""

    answers: list[AnswerView]


class ListAnswersUseCase(BaseUseCase):
    """Use case for listing the answers to a question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> None:
        """Initialize list answers use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.question_service.get_question(
            QuestionId(parse_resource_id(request.question_id, "Question"))
        )
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        answers = await self.answer_service.list_for_question(question.id)
        authors = await self.user_service.get_users_by_ids(
            [a.author_id for a in answers]
        )
        return ListAnswersResponse(
            answers=[
                AnswerView.from_domain(a, authors.get(a.author_id), viewer_id)
                for a in answers
            ]
        )
