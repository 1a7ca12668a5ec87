"""Tag domain service."""

from typing import Optional, Sequence

import logfire

from asklet.domain.model.tag import Tag
from asklet.domain.repository.tag import TagRepository, TagSortOrder
from asklet.domain.value import TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def list_tags(
        self,
        search: Optional[str] = None,
        sort: TagSortOrder = TagSortOrder.POPULAR,
        limit: int = 50,
    ) -> list[Tag]:
        """List tags.

        Args:
            search: Case-insensitive name filter
            sort: Sort order
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        with logfire.span(
            "tag_service.list_tags", search=search, sort=sort.value, limit=limit
        ):
            tags = await self.tag_repository.find_all(
                search=search, sort=sort, limit=limit
            )
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def record_usage(self, names: Sequence[TagName]) -> None:
        """Create tags that don't exist yet and bump each tag's question count."""
        if not names:
            return
        with logfire.span("tag_service.record_usage", tags=[n.root for n in names]):
            await self.tag_repository.increment_usage(names)
