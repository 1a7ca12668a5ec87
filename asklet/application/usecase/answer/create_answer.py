"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, parse_resource_id
from asklet.application.usecase.views import AnswerView
from asklet.domain.service import AnswerService, QuestionService, UserService
from asklet.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    content: str = ""
    author_id: str  # User ID from authenticated user


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> None:
        """Initialize create answer use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerView:
        """Execute create answer flow.

        Raises:
            NotFoundError: If the question or author does not exist
            ValidationError: If content is empty
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        question = await self.question_service.get_question(
            QuestionId(parse_resource_id(request.question_id, "Question"))
        )
        answer = await self.answer_service.create_answer(
            question, author, request.content
        )
        return AnswerView.from_domain(answer, author)
