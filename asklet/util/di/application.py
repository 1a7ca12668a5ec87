"""Application layer DI providers."""

from dishka import Scope, provide

from asklet.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from asklet.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from asklet.application.usecase.notification import (
    CreateNotificationUseCase,
    ListNotificationsUseCase,
    MarkReadUseCase,
)
from asklet.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from asklet.application.usecase.tag import ListTagsUseCase
from asklet.application.usecase.user import GetUserProfileUseCase
from asklet.application.usecase.vote import CastVoteUseCase, GetVoteStateUseCase
from asklet.domain.service import (
    AcceptanceService,
    AnswerService,
    AuthService,
    JWTService,
    NotificationService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from asklet.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        acceptance_service: AcceptanceService,
        user_service: UserService,
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            acceptance_service=acceptance_service,
            user_service=user_service,
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        acceptance_service: AcceptanceService,
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            acceptance_service=acceptance_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(answer_service=answer_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        acceptance_service: AcceptanceService,
        user_service: UserService,
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            acceptance_service=acceptance_service,
            user_service=user_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_state_use_case(self, vote_service: VoteService) -> GetVoteStateUseCase:
        """Provide vote state use case."""
        return GetVoteStateUseCase(vote_service=vote_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark notifications read use case."""
        return MarkReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_create_notification_use_case(
        self, notification_service: NotificationService, user_service: UserService
    ) -> CreateNotificationUseCase:
        """Provide create notification use case."""
        return CreateNotificationUseCase(
            notification_service=notification_service, user_service=user_service
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)
