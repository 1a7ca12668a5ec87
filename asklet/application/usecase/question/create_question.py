"""Create question use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from asklet.application.usecase.base import BaseUseCase
from asklet.application.usecase.views import QuestionView
from asklet.domain.service import QuestionService, UserService
from asklet.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    author_id: str  # User ID from authenticated user


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionView:
        """Execute create question flow.

        Raises:
            NotFoundError: If the author no longer exists
            ValidationError: If title, description or tags are invalid
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        question = await self.question_service.create_question(
            author_id=author.id,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
        return QuestionView.from_domain(question, author)
