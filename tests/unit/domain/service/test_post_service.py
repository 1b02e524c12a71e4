"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from memora.domain.error import NotFoundError, ValidationError
from memora.domain.repository import PostRepository
from memora.domain.service import PostService
from memora.domain.value import MediaKind, MediaRef, PostId, TagId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post_sets_matching_timestamps(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())
        tag_id = TagId(uuid4())

        post = await post_service.create_post(
            owner_id=owner_id, title="Dad's Chevelle", tag_ids=[tag_id], year=1973
        )

        assert post.created_at == post.updated_at
        assert post.owner_id == owner_id
        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_media_kind_requires_media_ref(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await post_service.create_post(
                owner_id=UserId(uuid4()),
                title="Missing media",
                tag_ids=[],
                media_kind=MediaKind.IMAGE,
            )

    @pytest.mark.asyncio
    async def test_empty_title_is_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await post_service.create_post(
                owner_id=UserId(uuid4()), title="", tag_ids=[]
            )


class TestPatchPost:
    """Tests for patch_post."""

    @pytest.mark.asyncio
    async def test_only_given_fields_change(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(
            owner_id=UserId(uuid4()),
            title="Original",
            description="Keep me",
            tag_ids=[TagId(uuid4())],
            year=1980,
            media_ref=MediaRef("abc.jpg"),
            media_kind=MediaKind.IMAGE,
        )

        updated = await post_service.patch_post(post.id, {"year": 1981})

        assert updated.year == 1981
        assert updated.title == "Original"
        assert updated.description == "Keep me"
        assert updated.tag_ids == post.tag_ids
        assert updated.media_ref == "abc.jpg"
        assert updated.owner_id == post.owner_id
        assert updated.created_at == post.created_at
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.patch_post(PostId(uuid4()), {"title": "Nope"})

    @pytest.mark.asyncio
    async def test_owner_cannot_be_patched(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(
            owner_id=UserId(uuid4()), title="Mine", tag_ids=[]
        )

        with pytest.raises(ValidationError, match="owner_id"):
            await post_service.patch_post(post.id, {"owner_id": UserId(uuid4())})


class TestListing:
    """Tests for list_all and list_by_owner."""

    @pytest.mark.asyncio
    async def test_list_by_owner_filters(self, unit_env):
        post_service = await unit_env.get(PostService)
        alice = UserId(uuid4())
        bob = UserId(uuid4())
        await post_service.create_post(owner_id=alice, title="A1", tag_ids=[])
        await post_service.create_post(owner_id=bob, title="B1", tag_ids=[])
        await post_service.create_post(owner_id=alice, title="A2", tag_ids=[])

        mine = await post_service.list_by_owner(alice)
        everything = await post_service.list_all()

        assert {p.title for p in mine} == {"A1", "A2"}
        assert len(everything) == 3
