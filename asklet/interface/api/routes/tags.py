"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from asklet.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)
from asklet.domain.repository import TagSortOrder

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
    search: str | None = None,
    sort: TagSortOrder = TagSortOrder.POPULAR,
    limit: int = Query(default=50, ge=1, le=200),
) -> ListTagsResponse:
    """List tags, most used first by default.

    Args:
        list_tags_use_case: List tags use case from DI
        search: Only tags whose name contains this text
        sort: popular, alphabetical or newest
        limit: Maximum number of tags (max 200)

    Returns:
        Matching tags with their question counts
    """
    return await list_tags_use_case.execute(
        ListTagsRequest(search=search, sort=sort, limit=limit)
    )
