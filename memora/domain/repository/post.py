"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from memora.domain.model.post import Post
from memora.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Scan the whole post collection.

        Returns:
            Every stored post, newest first
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Post]:
        """Find every post created by a user.

        Args:
            owner_id: The owner's user ID

        Returns:
            The user's posts, newest first
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
