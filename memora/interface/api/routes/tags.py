"""Tag routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from memora.application.usecase.tag import (
    CreateTagRequest,
    CreateTagResponse,
    CreateTagUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)
from memora.interface.api.errors import to_http_exception
from memora.interface.api.identity import current_user_id

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all known tags",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    limit: int = 1000,
    order_by: str = "name",
) -> ListTagsResponse:
    """List the tag registry.

    Args:
        use_case: List tags use case (injected)
        limit: Maximum number of tags to return (1-1000)
        order_by: Sort order ('name' or 'created_at')

    Example:
        GET /tags?limit=10&order_by=created_at
    """
    with logfire.span("api.list_tags", limit=limit, order_by=order_by):
        try:
            request = ListTagsRequest(limit=limit, order_by=order_by)
            return await use_case.execute(request)
        except Exception as e:
            raise to_http_exception(e, "list tags") from e


class CreateTagAPIRequest(BaseModel):
    """API request for creating a tag."""

    name: str = Field(min_length=1, max_length=200)


@router.post(
    "",
    response_model=CreateTagResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Find or create a tag by name",
)
async def create_tag(
    request: CreateTagAPIRequest,
    use_case: FromDishka[CreateTagUseCase],
    _user_id: UUID = Depends(current_user_id),
) -> CreateTagResponse:
    """Normalize the name and return its tag, creating it if unseen."""
    with logfire.span("api.create_tag", name=request.name):
        try:
            return await use_case.execute(CreateTagRequest(name=request.name))
        except Exception as e:
            raise to_http_exception(e, "create tag") from e
