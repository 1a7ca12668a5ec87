"""Domain layer DI providers."""

from dishka import Scope, provide

from asklet.config import AuthSettings, VotingSettings
from asklet.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from asklet.domain.service import (
    AcceptanceService,
    AnswerService,
    AuthService,
    JWTService,
    LiveNotifier,
    NotificationService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from asklet.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_auth_service(
        self, user_service: UserService, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide email/password authentication domain service."""
        return AuthService(user_service=user_service, auth_settings=auth_settings)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository, tag_service=tag_service
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        live_notifier: LiveNotifier,
    ) -> NotificationService:
        """Provide notification domain service.

        Args:
            notification_repository: Notification repository
            live_notifier: App-wide live channel registry

        Returns:
            NotificationService that stores and pushes notifications
        """
        return NotificationService(
            notification_repository=notification_repository,
            live_notifier=live_notifier,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            notification_service=notification_service,
        )

    @provide
    def get_vote_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        user_service: UserService,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            user_service=user_service,
            voting_settings=voting_settings,
        )

    @provide
    def get_acceptance_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> AcceptanceService:
        """Provide answer acceptance domain service."""
        return AcceptanceService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            user_service=user_service,
            notification_service=notification_service,
        )
