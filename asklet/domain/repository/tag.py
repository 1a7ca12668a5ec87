"""Tag repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Sequence

from asklet.domain.model.tag import Tag
from asklet.domain.value import TagName


class TagSortOrder(str, Enum):
    """Sort order for tag listings."""

    POPULAR = "popular"  # question_count DESC
    ALPHABETICAL = "alphabetical"  # name ASC
    NEWEST = "newest"  # created_at DESC


class TagRepository(ABC):
    """Repository interface for Tag entity."""

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        sort: TagSortOrder = TagSortOrder.POPULAR,
        limit: int = 50,
    ) -> list[Tag]:
        """Find tags.

        Args:
            search: Case-insensitive substring of the tag name
            sort: Sort order
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        pass

    @abstractmethod
    async def increment_usage(self, names: Sequence[TagName]) -> None:
        """Create missing tags and bump the question count of each name.

        Args:
            names: Tag names attached to a new question
        """
        pass
