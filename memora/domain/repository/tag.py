"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from memora.domain.model.tag import Tag
from memora.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository interface for the tag registry."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_or_create(self, name: TagName) -> Tag:
        """Return the tag with this name, creating it if needed.

        Must be atomic: two concurrent calls with the same name return the
        same tag and leave exactly one tag in the registry.

        Args:
            name: Tag name

        Returns:
            Existing or newly created tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_all(
        self, limit: Optional[int] = 1000, order_by: str = "name"
    ) -> list[Tag]:
        """Find all tags.

        Args:
            limit: Maximum number of tags to return, None for every tag
            order_by: Field to order by ('name' or 'created_at')

        Returns:
            List of tags
        """
        pass
