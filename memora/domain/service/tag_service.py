"""Tag domain service."""

from typing import Iterable, Mapping, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from memora.domain.error import ValidationError
from memora.domain.model.tag import Tag
from memora.domain.repository.tag import TagRepository
from memora.domain.value import UNKNOWN_TAG_NAME, TagId, TagKey, TagName

from .base import Service


class TagService(Service):
    """Domain service for the tag registry."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def find_or_create(self, name: TagName) -> Tag:
        """Get the tag with this name, creating it on first use.

        Args:
            name: Exact tag name

        Returns:
            The registry's tag for this name
        """
        with logfire.span("tag_service.find_or_create", tag_name=name.root):
            tag = await self.tag_repository.find_or_create(name)
            logfire.info("Tag resolved", tag_name=name.root, tag_id=str(tag.id))
            return tag

    async def ensure_tags(self, raw_names: Iterable[str]) -> list[Tag]:
        """Normalize user-typed tag names and make sure they all exist.

        Names that normalize to nothing are dropped, duplicates collapse onto
        their first occurrence.

        Args:
            raw_names: Tag names as typed by the user

        Returns:
            Tags in the order given

        Raises:
            ValidationError: If a normalized name is too long
        """
        raw_names = list(raw_names)
        with logfire.span("tag_service.ensure_tags", tags=raw_names):
            names: list[TagName] = []
            for raw in raw_names:
                normalized = TagName.normalize(raw)
                if not normalized:
                    logfire.debug("Dropping empty tag", raw=raw)
                    continue
                try:
                    name = TagName(normalized)
                except PydanticValidationError as e:
                    raise ValidationError(f"Invalid tag name: {raw!r}") from e
                if name not in names:
                    names.append(name)

            tags = [await self.find_or_create(name) for name in names]
            logfire.info("Tags ensured", count=len(tags))
            return tags

    async def get_all_tags(
        self, limit: Optional[int] = 1000, order_by: str = "name"
    ) -> list[Tag]:
        """Get all known tags.

        Args:
            limit: Maximum number of tags to return, None for every tag
            order_by: Field to order by ('name' or 'created_at')

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags", limit=limit, order_by=order_by):
            tags = await self.tag_repository.find_all(limit=limit, order_by=order_by)
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def get_tag_by_name(self, name: TagName) -> Tag | None:
        """Get a tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        with logfire.span("tag_service.get_tag_by_name", tag_name=name.root):
            tag = await self.tag_repository.find_by_name(name)
            if tag:
                logfire.info("Tag found", tag_name=name.root)
            else:
                logfire.warn("Tag not found", tag_name=name.root)
            return tag

    async def get_tag_names_by_ids(self, tag_ids: Iterable[TagId]) -> dict[TagId, str]:
        """Look up display names for tag identifiers.

        Identifiers no longer in the registry map to "unknown".

        Args:
            tag_ids: Tag identifiers

        Returns:
            Name per requested identifier
        """
        wanted = list(dict.fromkeys(tag_ids))
        if not wanted:
            return {}

        tags = await self.tag_repository.find_by_ids(wanted)
        found = {tag.id: tag.name.root for tag in tags}
        missing = [tag_id for tag_id in wanted if tag_id not in found]
        if missing:
            logfire.warn(
                "Posts reference unknown tags", tag_ids=[str(t) for t in missing]
            )
        return {tag_id: found.get(tag_id, UNKNOWN_TAG_NAME) for tag_id in wanted}

    async def resolve_weights(
        self, weights: Mapping[TagKey, float]
    ) -> dict[TagId, float]:
        """Resolve a weight mapping keyed by tag name or id to ids only.

        Unknown names are ignored. Identifiers pass through unchanged. When
        two keys resolve to the same tag the larger weight is kept.

        Args:
            weights: Weight per tag name or tag id

        Returns:
            Weight per tag id
        """
        with logfire.span("tag_service.resolve_weights", keys=len(weights)):
            names = [key for key in weights if isinstance(key, TagName)]
            tags = await self.tag_repository.find_by_names(names) if names else []
            id_by_name = {tag.name.root: tag.id for tag in tags}

            resolved: dict[TagId, float] = {}
            ignored: list[str] = []
            for key, weight in weights.items():
                if isinstance(key, TagName):
                    tag_id = id_by_name.get(key.root)
                    if tag_id is None:
                        ignored.append(key.root)
                        continue
                else:
                    tag_id = key
                resolved[tag_id] = max(weight, resolved.get(tag_id, weight))

            if ignored:
                logfire.info("Ignoring unknown tag names", tags=ignored)
            logfire.info("Weights resolved", resolved=len(resolved))
            return resolved
