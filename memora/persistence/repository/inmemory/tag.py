"""In-memory implementation of Tag repository for testing."""

import asyncio
from datetime import datetime
from typing import Optional
from uuid import uuid4

from memora.domain.model.tag import Tag
from memora.domain.repository.tag import TagRepository
from memora.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}
        self._name_index: dict[str, TagId] = {}
        self._lock = asyncio.Lock()

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        previous = self._tags.get(tag.id)
        if previous is not None:
            self._name_index.pop(previous.name.root, None)
        self._tags[tag.id] = tag
        self._name_index[tag.name.root] = tag.id
        return tag

    async def find_or_create(self, name: TagName) -> Tag:
        """Return the named tag, creating it under the lock if missing."""
        async with self._lock:
            existing = await self.find_by_name(name)
            if existing is not None:
                return existing
            now = datetime.now()
            tag = Tag(id=TagId(uuid4()), name=name, created_at=now, updated_at=now)
            return await self.save(tag)

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self._tags.get(tag_id)

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        return [self._tags[tag_id] for tag_id in tag_ids if tag_id in self._tags]

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        tag_id = self._name_index.get(name.root)
        return self._tags.get(tag_id) if tag_id else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        tags = []
        for name in names:
            tag = await self.find_by_name(name)
            if tag:
                tags.append(tag)
        return tags

    async def find_all(
        self, limit: Optional[int] = 1000, order_by: str = "name"
    ) -> list[Tag]:
        """Find all tags."""
        tags = list(self._tags.values())

        if order_by == "created_at":
            tags.sort(key=lambda t: t.created_at, reverse=True)
        else:
            tags.sort(key=lambda t: t.name.root)

        return tags[:limit]
