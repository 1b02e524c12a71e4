"""Unit tests for ListMyPostsUseCase."""

from uuid import uuid4

import pytest

from memora.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListMyPostsRequest,
    ListMyPostsUseCase,
)
from memora.domain.repository import PostRepository
from memora.domain.value import TagId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListMyPostsUseCase:
    """Tests for ListMyPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_only_callers_posts(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(ListMyPostsUseCase)
        me = str(uuid4())
        await create.execute(
            CreatePostRequest(owner_id=me, title="Mine", tag_names=["cars"])
        )
        await create.execute(CreatePostRequest(owner_id=str(uuid4()), title="Theirs"))

        result = await use_case.execute(ListMyPostsRequest(user_id=me))

        assert [p.title for p in result.posts] == ["Mine"]
        assert result.posts[0].tag_names == ["cars"]
        assert result.posts[0].media_url is None

    @pytest.mark.asyncio
    async def test_dangling_tag_shows_unknown(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(ListMyPostsUseCase)
        post = make_post([TagId(uuid4())], year=1990)
        await post_repo.save(post)

        result = await use_case.execute(ListMyPostsRequest(user_id=str(post.owner_id)))

        assert result.posts[0].tag_names == ["unknown"]
