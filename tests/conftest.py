"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

import logfire

from memora.domain.model import Post
from memora.domain.value import PostId, TagId, UserId

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_post(
    tag_ids: list[TagId],
    year: Optional[int] = None,
    owner_id: Optional[UserId] = None,
    title: str = "Test Post",
    age_minutes: int = 0,
    **fields,
) -> Post:
    """Helper function to build posts for tests.

    Args:
        tag_ids: Tags on the post
        year: Year the post belongs to
        owner_id: Owner, a fresh user if omitted
        title: Post title
        age_minutes: How long before BASE_TIME the post was created

    Returns:
        Post domain model
    """
    created_at = BASE_TIME - timedelta(minutes=age_minutes)
    return Post(
        id=PostId(uuid4()),
        title=title,
        tag_ids=tag_ids,
        year=year,
        owner_id=owner_id or UserId(uuid4()),
        created_at=created_at,
        updated_at=created_at,
        **fields,
    )


def new_tag_id() -> TagId:
    """Fresh tag identifier."""
    return TagId(uuid4())
