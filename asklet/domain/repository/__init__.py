"""Repository interfaces for Asklet domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from asklet.domain.repository.answer import AnswerRepository
from asklet.domain.repository.notification import NotificationRepository
from asklet.domain.repository.question import QuestionRepository, QuestionSortOrder
from asklet.domain.repository.tag import TagRepository, TagSortOrder
from asklet.domain.repository.user import UserRepository

__all__ = [
    "AnswerRepository",
    "NotificationRepository",
    "QuestionRepository",
    "QuestionSortOrder",
    "TagRepository",
    "TagSortOrder",
    "UserRepository",
]
