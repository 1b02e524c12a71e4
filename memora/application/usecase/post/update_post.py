"""Update post use case."""

from typing import Any, Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from memora.application.usecase.post.create_post import MAX_YEAR, MIN_YEAR
from memora.application.usecase.post.view import PostView
from memora.domain.error import NotAuthorizedError, NotFoundError
from memora.domain.service import MediaService, PostService, TagService
from memora.domain.value import MediaKind, PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Only fields explicitly set are changed. Setting ``year`` or the media
    fields to None clears them.
    """

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)
    title: Optional[str] = None
    description: Optional[str] = None
    tag_names: Optional[list[str]] = None
    year: Optional[int] = Field(default=None, ge=MIN_YEAR, le=MAX_YEAR)
    media_ref: Optional[str] = None
    media_kind: Optional[MediaKind] = None


class UpdatePostResponse(PostView):
    """Update post response."""

    pass


class UpdatePostUseCase:
    """Use case for patching a post."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        media_service: MediaService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post service
            tag_service: Tag service
            media_service: Media service
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.media_service = media_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with post ID, user ID and changed fields

        Returns:
            Updated post details

        Raises:
            NotFoundError: If the post (or newly attached media) does not exist
            NotAuthorizedError: If user doesn't own the post
            ValidationError: If a new value is invalid
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("update_post.execute", post_id=request.post_id):
            # 1. Retrieve existing post
            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", request.post_id)

            # 2. Check authorization (user owns post)
            if post.owner_id != user_id:
                raise NotAuthorizedError("post", request.post_id, request.user_id)

            # 3. Translate the request into field changes
            fields = request.model_dump(exclude_unset=True)
            fields.pop("post_id", None)
            fields.pop("user_id", None)

            changes: dict[str, Any] = {}
            for name in ("title", "description", "year", "media_ref", "media_kind"):
                if name in fields:
                    changes[name] = fields[name]
            if "tag_names" in fields:
                tags = await self.tag_service.ensure_tags(fields["tag_names"] or [])
                changes["tag_ids"] = [tag.id for tag in tags]
            if changes.get("media_ref") is not None:
                if await self.media_service.resolve_url(changes["media_ref"]) is None:
                    raise NotFoundError("Media", changes["media_ref"])

            # 4. Patch via service
            updated = await self.post_service.patch_post(post_id, changes)

            tag_names = await self.tag_service.get_tag_names_by_ids(updated.tag_ids)
            media_url = await self.media_service.resolve_url(updated.media_ref)

            logfire.info("Post updated", post_id=request.post_id, fields=sorted(changes))
            return UpdatePostResponse(
                **PostView.build(updated, tag_names, media_url).model_dump()
            )
