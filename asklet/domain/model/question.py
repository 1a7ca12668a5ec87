"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from asklet.domain.model.common import DomainModel
from asklet.domain.model.votes import Votes
from asklet.domain.value import AnswerId, QuestionId, TagName, UserId


class Question(DomainModel):
    """Question aggregate root.

    ``accepted_answer_id`` points at the single accepted answer, if any.
    ``version`` is bumped on every vote write and guards concurrent voters.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=400)
    description: str = Field(min_length=1)
    tags: list[TagName] = Field(default_factory=list)
    author_id: UserId
    votes: Votes = Field(default_factory=Votes)
    accepted_answer_id: Optional[AnswerId] = None
    views: int = Field(default=0, ge=0)
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Trim surrounding whitespace from the title."""
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v
