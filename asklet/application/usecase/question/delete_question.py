"""Delete question use case."""

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
from asklet.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str  # User ID from authenticated user


class DeleteQuestionUseCase(BaseUseCase):
    """Use case for deleting a question together with its answers.

    The accepted answer, if any, loses its acceptance bonus first. Vote
    reputation already earned on the question and its answers is kept.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        acceptance_service: AcceptanceService,
        user_service: UserService,
    ) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            acceptance_service: Acceptance domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.acceptance_service = acceptance_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> MessageResponse:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question or requester does not exist
            NotAuthorizedError: If the requester is neither the author nor an admin
        """
        requester = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        question = await self.question_service.get_question(
            QuestionId(parse_resource_id(request.question_id, "Question"))
        )

        with logfire.span("delete_question.execute", question_id=str(question.id)):
            self.question_service.authorize_delete(question, requester)
            question = await self.acceptance_service.withdraw(question)
            await self.answer_service.delete_for_question(question.id)
            await self.question_service.delete_question(question, requester)
            return MessageResponse(message="Question deleted successfully")
