"""Delete answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, MessageResponse, parse_resource_id
from asklet.domain.service import (
    AcceptanceService,
    AnswerService,
    QuestionService,
    UserService,
)
from asklet.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str
    user_id: str  # User ID from authenticated user


class DeleteAnswerUseCase(BaseUseCase):
    """Use case for deleting an answer.

    Deleting the accepted answer leaves its question with no accepted
    answer and takes back the acceptance bonus from the answer's author.
    """

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        acceptance_service: AcceptanceService,
        user_service: UserService,
    ) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            acceptance_service: Acceptance domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.acceptance_service = acceptance_service
        self.user_service = user_service

    async def execute(self, request: DeleteAnswerRequest) -> MessageResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer or requester does not exist
            NotAuthorizedError: If the requester is neither the author nor an admin
        """
        requester = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        answer = await self.answer_service.get_answer(
            AnswerId(parse_resource_id(request.answer_id, "Answer"))
        )

        with logfire.span("delete_answer.execute", answer_id=str(answer.id)):
            self.answer_service.authorize_delete(answer, requester)
            question = await self.question_service.get_question(answer.question_id)
            await self.acceptance_service.withdraw(question, answer)
            await self.answer_service.delete_answer(answer, requester)
            return MessageResponse(message="Answer deleted successfully")
