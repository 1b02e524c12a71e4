"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from memora.domain.model import Post
from memora.domain.repository.post import PostRepository
from memora.domain.value import PostId, UserId
from memora.persistence.mappers import post_tags_rows, post_to_dict, row_to_post
from memora.persistence.tables import post_tags_table, posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tag_ids_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch tag ids for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> tag ids in position order
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, post_tags_table.c.tag_id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(post_tags_table.c.post_id, post_tags_table.c.position)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.tag_id)

        return post_tag_map

    async def _to_posts(self, rows) -> List[Post]:
        post_ids = [row.id for row in rows]
        post_tag_map = await self._fetch_tag_ids_for_posts(post_ids)
        return [
            row_to_post(row._asdict(), tag_ids=post_tag_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            posts = await self._to_posts([row])
            return posts[0]

    async def find_all(self) -> List[Post]:
        """Scan every post, newest first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(posts_table.c.created_at.desc())
            result = await self.session.execute(stmt)
            posts = await self._to_posts(result.fetchall())
            logfire.info("Posts scanned", count=len(posts))
            return posts

    async def find_by_owner(self, owner_id: UserId) -> List[Post]:
        """Find a user's posts, newest first."""
        with logfire.span("post_repository.find_by_owner", owner_id=str(owner_id)):
            stmt = (
                select(posts_table)
                .where(posts_table.c.owner_id == owner_id)
                .order_by(posts_table.c.created_at.desc())
            )
            result = await self.session.execute(stmt)
            return await self._to_posts(result.fetchall())

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            title=post.title,
            tag_ids=[str(t) for t in post.tag_ids],
        ):
            existing = await self.find_by_id(post.id)

            post_dict = post_to_dict(post)

            if existing:
                logfire.info("Updating existing post", post_id=str(post.id))
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
                await self.session.execute(stmt)

                await self.session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post.id)
                )
            else:
                logfire.info(
                    "Inserting new post",
                    post_id=str(post.id),
                    title=post.title,
                    owner_id=str(post.owner_id),
                )
                await self.session.execute(posts_table.insert().values(**post_dict))

            rows = post_tags_rows(post)
            if rows:
                await self.session.execute(insert(post_tags_table), rows)

            await self.session.flush()
            logfire.info("Post saved successfully", post_id=str(post.id))
            return post
