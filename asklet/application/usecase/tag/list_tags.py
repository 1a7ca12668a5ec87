"""List tags use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from asklet.application.usecase.base import BaseUseCase, CamelModel
from asklet.domain.repository import TagSortOrder
from asklet.domain.service import TagService


class ListTagsRequest(BaseModel):
    """List tags request."""

    search: str | None = None
    sort: TagSortOrder = TagSortOrder.POPULAR
    limit: int = Field(default=50, ge=1, le=200)


class TagItem(CamelModel):
    """Tag item in response."""

    name: str
    description: str
    question_count: int
    created_at: datetime


class ListTagsResponse(CamelModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase(BaseUseCase):
    """Use case for listing tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow."""
        search = request.search.strip() if request.search else None
        tags = await self.tag_service.list_tags(
            search=search or None, sort=request.sort, limit=request.limit
        )
        return ListTagsResponse(
            tags=[
                TagItem(
                    name=tag.name.root,
                    description=tag.description,
                    question_count=tag.question_count,
                    created_at=tag.created_at,
                )
                for tag in tags
            ]
        )
