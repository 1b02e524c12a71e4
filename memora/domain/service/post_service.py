"""Post domain service."""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from memora.domain.error import NotFoundError, ValidationError
from memora.domain.model.post import Post
from memora.domain.repository import PostRepository
from memora.domain.value import MediaKind, MediaRef, PostId, TagId, UserId

from .base import Service

# Fields a patch may change. Identity, ownership and timestamps never change.
PATCHABLE_FIELDS = frozenset(
    {"title", "description", "tag_ids", "year", "media_ref", "media_kind"}
)


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        owner_id: UserId,
        title: str,
        tag_ids: list[TagId],
        description: str = "",
        year: Optional[int] = None,
        media_ref: Optional[MediaRef] = None,
        media_kind: Optional[MediaKind] = None,
    ) -> Post:
        """Create and store a new post.

        Args:
            owner_id: Creating user
            title: Post title
            tag_ids: Tags, in the owner's order
            description: Free text description
            year: Year the post belongs to
            media_ref: Stored media reference
            media_kind: Kind of the stored media

        Returns:
            The stored post

        Raises:
            ValidationError: If the post fields are invalid
        """
        with logfire.span(
            "post_service.create_post", owner_id=str(owner_id), title=title
        ):
            now = datetime.now()
            try:
                post = Post(
                    id=PostId(uuid4()),
                    title=title,
                    description=description,
                    tag_ids=tag_ids,
                    year=year,
                    owner_id=owner_id,
                    media_ref=media_ref,
                    media_kind=media_kind,
                    created_at=now,
                    updated_at=now,
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def patch_post(self, post_id: PostId, changes: dict[str, Any]) -> Post:
        """Apply a partial update to a post.

        Only the fields present in ``changes`` are touched; ``updated_at`` is
        always refreshed.

        Args:
            post_id: Post ID
            changes: New values keyed by field name

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If a field is not patchable or a value is invalid
        """
        with logfire.span(
            "post_service.patch_post", post_id=str(post_id), fields=sorted(changes)
        ):
            unknown = set(changes) - PATCHABLE_FIELDS
            if unknown:
                raise ValidationError(
                    f"Fields cannot be updated: {', '.join(sorted(unknown))}"
                )

            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found for patch", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            # Domain models are immutable, rebuild with validation
            try:
                updated = Post.model_validate(
                    {**post.model_dump(), **changes, "updated_at": datetime.now()}
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e

            saved = await self.post_repository.save(updated)
            logfire.info("Post patched", post_id=str(post_id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def list_all(self) -> list[Post]:
        """Scan every post."""
        with logfire.span("post_service.list_all"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts scanned", count=len(posts))
            return posts

    async def list_by_owner(self, owner_id: UserId) -> list[Post]:
        """List the posts a user created.

        Args:
            owner_id: Owner's user ID

        Returns:
            The user's posts, newest first
        """
        with logfire.span("post_service.list_by_owner", owner_id=str(owner_id)):
            posts = await self.post_repository.find_by_owner(owner_id)
            logfire.info("Owner posts listed", owner_id=str(owner_id), count=len(posts))
            return posts
