"""Tag entity."""

from datetime import datetime

from pydantic import Field

from asklet.domain.model.common import DomainModel
from asklet.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag with the number of questions filed under it."""

    id: TagId
    name: TagName
    description: str = ""
    question_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
