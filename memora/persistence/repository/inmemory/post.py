"""In-memory post repository for testing."""

from typing import Optional

from memora.domain.model.post import Post
from memora.domain.repository.post import PostRepository
from memora.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Scan every post, newest first."""
        return sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)

    async def find_by_owner(self, owner_id: UserId) -> list[Post]:
        """Find a user's posts, newest first."""
        posts = [p for p in self._posts.values() if p.owner_id == owner_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post
