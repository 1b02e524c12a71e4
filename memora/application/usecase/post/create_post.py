"""Create post use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from memora.application.usecase.post.view import PostView
from memora.domain.error import NotFoundError, ValidationError
from memora.domain.service import MediaService, PostService, TagService
from memora.domain.value import MediaKind, MediaRef, UserId

MIN_YEAR = 1900
MAX_YEAR = 3000


class CreatePostRequest(BaseModel):
    """Create post request."""

    owner_id: str  # User ID of the caller
    title: str
    description: str = ""
    tag_names: list[str] = Field(default_factory=list)  # Raw, normalized here
    year: Optional[int] = Field(default=None, ge=MIN_YEAR, le=MAX_YEAR)
    media_ref: Optional[str] = None
    media_kind: Optional[MediaKind] = None


class CreatePostResponse(PostView):
    """Create post response."""

    pass


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        media_service: MediaService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            media_service: Media domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.media_service = media_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Check the attached media exists (if any)
        2. Normalize tag names, creating unseen tags
        3. Create and store the post

        Args:
            request: Create post request

        Returns:
            Created post with tag names and media URL

        Raises:
            NotFoundError: If the media reference has no stored object
            ValidationError: If tags or post fields are invalid
        """
        with logfire.span(
            "create_post.execute", owner_id=request.owner_id, title=request.title
        ):
            media_url = None
            if request.media_ref is not None:
                if request.media_kind is None:
                    raise ValidationError("media_kind is required with media_ref")
                media_url = await self.media_service.resolve_url(
                    MediaRef(request.media_ref)
                )
                if media_url is None:
                    raise NotFoundError("Media", request.media_ref)

            tags = await self.tag_service.ensure_tags(request.tag_names)

            post = await self.post_service.create_post(
                owner_id=UserId(UUID(request.owner_id)),
                title=request.title,
                description=request.description,
                tag_ids=[tag.id for tag in tags],
                year=request.year,
                media_ref=MediaRef(request.media_ref) if request.media_ref else None,
                media_kind=request.media_kind,
            )

            logfire.info("Post created", post_id=str(post.id), tags=len(tags))
            tag_names = {tag.id: tag.name.root for tag in tags}
            return CreatePostResponse(
                **PostView.build(post, tag_names, media_url).model_dump()
            )
