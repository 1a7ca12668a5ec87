"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, parse_resource_id
from asklet.application.usecase.views import AnswerView
from asklet.domain.service import AnswerService, UserService
from asklet.domain.value import AnswerId, UserId


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: str
    user_id: str  # User ID from authenticated user
    content: str = ""


class UpdateAnswerUseCase(BaseUseCase):
    """Use case for editing an answer as its author or an admin."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: UpdateAnswerRequest) -> AnswerView:
        """Execute update answer flow.

        Raises:
            NotFoundError: If the answer or editor does not exist
            NotAuthorizedError: If the editor is neither the author nor an admin
            ValidationError: If content is empty
        """
        editor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        answer = await self.answer_service.get_answer(
            AnswerId(parse_resource_id(request.answer_id, "Answer"))
        )
        updated = await self.answer_service.update_answer(
            answer, editor, request.content
        )
        author = (
            editor
            if editor.id == updated.author_id
            else await self.user_service.get_by_id(updated.author_id)
        )
        return AnswerView.from_domain(updated, author, editor.id)
