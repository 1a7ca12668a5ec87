"""Accept answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, CamelModel, parse_resource_id
from asklet.domain.service import AcceptanceService, AnswerService, QuestionService
from asklet.domain.value import AnswerId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    answer_id: str
    user_id: str  # User ID from authenticated user


class AcceptAnswerResponse(CamelModel):
    """Accept answer response."""

    message: str
    is_accepted: bool


class AcceptAnswerUseCase(BaseUseCase):
    """Use case for toggling acceptance of an answer."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        acceptance_service: AcceptanceService,
    ) -> None:
        """Initialize accept answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            acceptance_service: Acceptance domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.acceptance_service = acceptance_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the answer or its question does not exist
            NotAuthorizedError: If the user did not ask the question
        """
        answer_id = AnswerId(parse_resource_id(request.answer_id, "Answer"))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("accept_answer.execute", answer_id=str(answer_id)):
            answer = await self.answer_service.get_answer(answer_id)
            question = await self.question_service.get_question(answer.question_id)

            result = await self.acceptance_service.toggle_accept(
                question, answer, user_id
            )
            return AcceptAnswerResponse(
                message="Answer accepted" if result.is_accepted else "Answer unaccepted",
                is_accepted=result.is_accepted,
            )
