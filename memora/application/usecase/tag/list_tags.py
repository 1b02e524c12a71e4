"""List tags use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from memora.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    tag_id: str
    name: str
    created_at: datetime


class ListTagsRequest(BaseModel):
    """List tags request."""

    limit: int = Field(default=1000, ge=1, le=1000)
    order_by: str = Field(default="name", pattern="^(name|created_at)$")


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing the tag registry."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Known tags
        """
        with logfire.span(
            "list_tags.execute",
            limit=request.limit,
            order_by=request.order_by,
        ):
            tags = await self.tag_service.get_all_tags(
                limit=request.limit,
                order_by=request.order_by,
            )

            tag_items = [
                TagItem(tag_id=str(tag.id), name=tag.name.root, created_at=tag.created_at)
                for tag in tags
            ]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(tags=tag_items)
