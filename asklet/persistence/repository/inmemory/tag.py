"""In-memory tag repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

from asklet.domain.model.tag import Tag
from asklet.domain.repository.tag import TagRepository, TagSortOrder
from asklet.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        self._tags: dict[str, Tag] = {}

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        return self._tags.get(name.root)

    async def find_all(
        self,
        search: Optional[str] = None,
        sort: TagSortOrder = TagSortOrder.POPULAR,
        limit: int = 50,
    ) -> list[Tag]:
        """Find tags."""
        tags = list(self._tags.values())
        if search:
            tags = [t for t in tags if search.lower() in t.name.root]

        if sort == TagSortOrder.ALPHABETICAL:
            tags.sort(key=lambda t: t.name.root)
        elif sort == TagSortOrder.NEWEST:
            tags.sort(key=lambda t: t.created_at, reverse=True)
        else:
            tags.sort(key=lambda t: (-t.question_count, t.name.root))
        return tags[:limit]

    async def increment_usage(self, names: Sequence[TagName]) -> None:
        """Create missing tags and bump each tag's question count."""
        for name in names:
            tag = self._tags.get(name.root)
            if tag is None:
                self._tags[name.root] = Tag(
                    id=TagId(uuid4()),
                    name=name,
                    question_count=1,
                    created_at=datetime.now(),
                )
            else:
                self._tags[name.root] = tag.model_copy(
                    update={"question_count": tag.question_count + 1}
                )
