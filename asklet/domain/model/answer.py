"""Answer entity."""

from datetime import datetime

from pydantic import Field

from asklet.domain.model.common import DomainModel
from asklet.domain.model.votes import Votes
from asklet.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    ``is_accepted`` mirrors the owning question's ``accepted_answer_id``;
    at most one answer per question is accepted.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1)
    votes: Votes = Field(default_factory=Votes)
    is_accepted: bool = False
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
