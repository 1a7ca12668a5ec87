"""Domain model entities for Asklet."""

from asklet.domain.model.answer import Answer
from asklet.domain.model.notification import Notification
from asklet.domain.model.question import Question
from asklet.domain.model.tag import Tag
from asklet.domain.model.user import User
from asklet.domain.model.votes import Votes

__all__ = [
    "Answer",
    "Notification",
    "Question",
    "Tag",
    "User",
    "Votes",
]
