"""PostgreSQL repository implementations."""

from asklet.persistence.repository.answer import PostgresAnswerRepository
from asklet.persistence.repository.notification import PostgresNotificationRepository
from asklet.persistence.repository.question import PostgresQuestionRepository
from asklet.persistence.repository.tag import PostgresTagRepository
from asklet.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAnswerRepository",
    "PostgresNotificationRepository",
    "PostgresQuestionRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
]
