"""PostgreSQL implementation of Tag repository."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy import insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from memora.domain.model.tag import Tag
from memora.domain.repository.tag import TagRepository
from memora.domain.value import TagId, TagName
from memora.persistence.mappers import row_to_tag, tag_to_dict
from memora.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        tag_dict = tag_to_dict(tag)

        existing = await self.find_by_id(tag.id)

        if existing:
            stmt = (
                update(tags_table).where(tags_table.c.id == tag.id).values(**tag_dict)
            )
        else:
            stmt = insert(tags_table).values(**tag_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return tag

    async def find_or_create(self, name: TagName) -> Tag:
        """Insert the tag unless the name is taken, then read it back.

        The unique index on ``name`` arbitrates concurrent creators.
        """
        with logfire.span("tag_repository.find_or_create", tag_name=name.root):
            now = datetime.now(timezone.utc)
            stmt = (
                pg_insert(tags_table)
                .values(id=uuid4(), name=name.root, created_at=now, updated_at=now)
                .on_conflict_do_nothing(index_elements=["name"])
            )
            await self.session.execute(stmt)
            await self.session.flush()

            tag = await self.find_by_name(name)
            if tag is None:
                # Only possible if the row vanished between insert and select
                raise RuntimeError(f"Tag {name.root!r} missing after upsert")
            return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        if not tag_ids:
            return []

        stmt = select(tags_table).where(tags_table.c.id.in_(tag_ids))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_all(
        self, limit: Optional[int] = 1000, order_by: str = "name"
    ) -> list[Tag]:
        """Find all tags, uncapped when limit is None."""
        stmt = select(tags_table)
        if limit is not None:
            stmt = stmt.limit(limit)

        if order_by == "created_at":
            stmt = stmt.order_by(tags_table.c.created_at.desc())
        else:
            stmt = stmt.order_by(tags_table.c.name)

        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]
