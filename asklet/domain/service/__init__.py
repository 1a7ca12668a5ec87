"""Domain services."""

from .acceptance_service import AcceptanceResult, AcceptanceService
from .answer_service import AnswerService
from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .notification_service import LiveNotifier, NotificationPage, NotificationService
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService, UserStats
from .vote_engine import VoteOutcome, apply_vote
from .vote_service import VoteResult, VoteService

__all__ = [
    "AcceptanceResult",
    "AcceptanceService",
    "AnswerService",
    "AuthService",
    "JWTService",
    "LiveNotifier",
    "NotificationPage",
    "NotificationService",
    "QuestionService",
    "Service",
    "TagService",
    "UserService",
    "UserStats",
    "VoteOutcome",
    "VoteResult",
    "VoteService",
    "apply_vote",
]
