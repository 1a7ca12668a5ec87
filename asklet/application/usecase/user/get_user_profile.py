"""Get user profile use case."""

import logfire
from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, CamelModel
from asklet.application.usecase.views import AnswerView, AuthorView, QuestionView
from asklet.domain.error import NotFoundError
from asklet.domain.repository import QuestionSortOrder
from asklet.domain.service import AnswerService, QuestionService, UserService
from asklet.domain.value import Username

RECENT_ITEMS = 5


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str


class UserStatsView(CamelModel):
    """Profile counters."""

    question_count: int
    answer_count: int
    accepted_answers: int
    reputation: int


class GetUserProfileResponse(CamelModel):
    """Public profile of a user."""

    user: AuthorView
    stats: UserStatsView
    recent_questions: list[QuestionView]
    recent_answers: list[AnswerView]


class GetUserProfileUseCase(BaseUseCase):
    """Use case for viewing a user's public profile."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If no user has that username
        """
        with logfire.span("get_user_profile.execute", username=request.username):
            try:
                username = Username(request.username)
            except ValueError:
                raise NotFoundError("User", request.username)

            user = await self.user_service.get_user_by_username(username)
            if not user:
                raise NotFoundError("User", request.username)

            stats = await self.user_service.get_stats(user)
            questions, _ = await self.question_service.list_questions(
                page=1,
                limit=RECENT_ITEMS,
                sort=QuestionSortOrder.NEWEST,
                author_id=user.id,
            )
            answers = await self.answer_service.list_by_author(
                user.id, limit=RECENT_ITEMS
            )

            return GetUserProfileResponse(
                user=AuthorView.from_domain(user),
                stats=UserStatsView(
                    question_count=stats.question_count,
                    answer_count=stats.answer_count,
                    accepted_answers=stats.accepted_answers,
                    reputation=stats.reputation,
                ),
                recent_questions=[QuestionView.from_domain(q, user) for q in questions],
                recent_answers=[AnswerView.from_domain(a, user) for a in answers],
            )
