"""Create tag use case."""

import logfire
from pydantic import BaseModel

from memora.application.usecase.tag.list_tags import TagItem
from memora.domain.error import ValidationError
from memora.domain.service import TagService


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str  # As typed, normalized before lookup


class CreateTagResponse(TagItem):
    """Create tag response, the existing tag if the name was taken."""

    pass


class CreateTagUseCase:
    """Use case for finding or creating a tag by name."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Args:
            request: Create tag request

        Returns:
            The registry's tag for the normalized name

        Raises:
            ValidationError: If the name normalizes to nothing or is too long
        """
        with logfire.span("create_tag.execute", name=request.name):
            tags = await self.tag_service.ensure_tags([request.name])
            if not tags:
                raise ValidationError(f"Tag name {request.name!r} is empty")

            tag = tags[0]
            return CreateTagResponse(
                tag_id=str(tag.id), name=tag.name.root, created_at=tag.created_at
            )
