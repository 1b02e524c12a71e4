"""Integration tests for the PostgreSQL repositories.

Need a migrated database, set DATABASE__URL to run them.
"""

import os
from uuid import uuid4

import pytest

from memora.domain.repository import PostRepository, TagRepository
from memora.domain.value import MediaKind, MediaRef, TagId, TagName, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="PostgreSQL integration tests need DATABASE__URL",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _unique(prefix: str) -> TagName:
    return TagName(f"{prefix}-{uuid4().hex[:12]}")


class TestTagRepositoryIntegration:
    """Integration tests for PostgresTagRepository."""

    @pytest.mark.asyncio
    async def test_find_or_create_is_idempotent(self, integration_env):
        repo = await integration_env.get(TagRepository)
        name = _unique("cars")

        first = await repo.find_or_create(name)
        second = await repo.find_or_create(name)

        assert first.id == second.id
        assert (await repo.find_by_name(name)).id == first.id

    @pytest.mark.asyncio
    async def test_names_are_case_sensitive(self, integration_env):
        repo = await integration_env.get(TagRepository)
        lower = _unique("trucks")
        upper = TagName(lower.root.upper())

        a = await repo.find_or_create(lower)
        b = await repo.find_or_create(upper)

        assert a.id != b.id

    @pytest.mark.asyncio
    async def test_repeated_creation_yields_one_tag(self, integration_env):
        repo = await integration_env.get(TagRepository)
        name = _unique("race")

        tags = [await repo.find_or_create(name) for _ in range(3)]
        found = await repo.find_by_names([name])

        assert len({t.id for t in tags}) == 1
        assert [t.id for t in found] == [tags[0].id]

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_unknown(self, integration_env):
        repo = await integration_env.get(TagRepository)
        tag = await repo.find_or_create(_unique("known"))

        found = await repo.find_by_ids([tag.id, TagId(uuid4())])

        assert [t.id for t in found] == [tag.id]


class TestPostRepositoryIntegration:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_save_keeps_tag_order(self, integration_env):
        tag_repo = await integration_env.get(TagRepository)
        post_repo = await integration_env.get(PostRepository)
        tags = [await tag_repo.find_or_create(_unique(p)) for p in ("z", "a", "m")]
        post = make_post(
            [t.id for t in tags],
            year=1973,
            media_ref=MediaRef("abc.jpg"),
            media_kind=MediaKind.IMAGE,
        )

        await post_repo.save(post)
        found = await post_repo.find_by_id(post.id)

        assert found is not None
        assert found.tag_ids == [t.id for t in tags]
        assert found.year == 1973
        assert found.media_kind == MediaKind.IMAGE

    @pytest.mark.asyncio
    async def test_update_replaces_tags(self, integration_env):
        tag_repo = await integration_env.get(TagRepository)
        post_repo = await integration_env.get(PostRepository)
        old = await tag_repo.find_or_create(_unique("old"))
        new = await tag_repo.find_or_create(_unique("new"))
        post = make_post([old.id], year=1990)
        await post_repo.save(post)

        await post_repo.save(post.model_copy(update={"tag_ids": [new.id], "year": None}))
        found = await post_repo.find_by_id(post.id)

        assert found.tag_ids == [new.id]
        assert found.year is None

    @pytest.mark.asyncio
    async def test_find_by_owner(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        owner = UserId(uuid4())
        older = make_post([], owner_id=owner, age_minutes=10)
        newer = make_post([], owner_id=owner)
        await post_repo.save(older)
        await post_repo.save(newer)
        await post_repo.save(make_post([]))

        found = await post_repo.find_by_owner(owner)

        assert [p.id for p in found] == [newer.id, older.id]
