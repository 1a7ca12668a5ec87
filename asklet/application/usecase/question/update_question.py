"""Update question use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, parse_resource_id
from asklet.application.usecase.views import QuestionView
from asklet.domain.service import AnswerService, QuestionService, UserService
from asklet.domain.value import QuestionId, UserId


class UpdateQuestionRequest(BaseModel):
    """Update question request; omitted fields stay as they are."""

    question_id: str
    user_id: str  # User ID from authenticated user
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None


class UpdateQuestionUseCase(BaseUseCase):
    """Use case for editing a question as its author or an admin."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionView:
        """Execute update question flow.

        Raises:
            NotFoundError: If the question or editor does not exist
            NotAuthorizedError: If the editor is neither the author nor an admin
            ValidationError: If a given field is invalid
        """
        editor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        question = await self.question_service.get_question(
            QuestionId(parse_resource_id(request.question_id, "Question"))
        )
        updated = await self.question_service.update_question(
            question,
            editor,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
        author = (
            editor
            if editor.id == updated.author_id
            else await self.user_service.get_by_id(updated.author_id)
        )
        counts = await self.answer_service.count_for_questions([updated.id])
        return QuestionView.from_domain(
            updated, author, answer_count=counts.get(updated.id, 0), viewer_id=editor.id
        )
