"""Post representation shared by post and search use cases."""

from datetime import datetime
from typing import Mapping, Optional

from pydantic import BaseModel

from memora.domain.model import Post
from memora.domain.value import UNKNOWN_TAG_NAME, TagId


class PostView(BaseModel):
    """A post as returned to clients, with tag names and a media URL."""

    post_id: str
    title: str
    description: str
    tag_ids: list[str]
    tag_names: list[str]
    year: Optional[int]
    owner_id: str
    media_ref: Optional[str]
    media_kind: Optional[str]
    media_url: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls,
        post: Post,
        tag_names: Mapping[TagId, str],
        media_url: Optional[str] = None,
    ) -> "PostView":
        """Build a view from a post and resolved display data.

        Args:
            post: Domain post
            tag_names: Display name per tag id (missing ids show as "unknown")
            media_url: Resolved media URL

        Returns:
            Post view
        """
        return cls(
            post_id=str(post.id),
            title=post.title,
            description=post.description,
            tag_ids=[str(tag_id) for tag_id in post.tag_ids],
            tag_names=[tag_names.get(t, UNKNOWN_TAG_NAME) for t in post.tag_ids],
            year=post.year,
            owner_id=str(post.owner_id),
            media_ref=post.media_ref,
            media_kind=post.media_kind.value if post.media_kind else None,
            media_url=media_url,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
