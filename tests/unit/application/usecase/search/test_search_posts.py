"""Unit tests for SearchPostsUseCase."""

from uuid import uuid4

import pytest

from memora.application.usecase.search import (
    SearchPostsRequest,
    SearchPostsUseCase,
    parse_weight_keys,
)
from memora.domain.repository import PostRepository
from memora.domain.service import TagService
from memora.domain.value import TagId, TagKeyKind, TagName
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestParseWeightKeys:
    """Tests for reading client weight keys."""

    def test_names(self):
        parsed = parse_weight_keys({"cars": 0.5, " cars ": 0.8}, TagKeyKind.NAME)

        assert parsed == {TagName("cars"): 0.8}

    def test_ids_skip_garbage(self):
        tag_id = uuid4()

        parsed = parse_weight_keys(
            {str(tag_id): 0.4, "not-a-uuid": 1.0}, TagKeyKind.ID
        )

        assert parsed == {TagId(tag_id): 0.4}


class TestSearchPostsUseCase:
    """Tests for SearchPostsUseCase."""

    @pytest.mark.asyncio
    async def test_search_by_names(self, unit_env):
        tag_service = await unit_env.get(TagService)
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(SearchPostsUseCase)
        cars, trucks = await tag_service.ensure_tags(["cars", "trucks"])
        exact = make_post([trucks.id], year=1973, title="exact")
        near = make_post([cars.id, trucks.id], year=1974, title="near")
        for post in (near, exact):
            await post_repo.save(post)

        result = await use_case.execute(
            SearchPostsRequest(
                user_id=str(uuid4()),
                year=1973,
                weights={"cars": 1.0, "trucks": 0.2},
            )
        )

        assert [r.title for r in result.results] == ["exact", "near"]
        assert result.results[0].year_rank == 0
        assert result.results[1].year_rank == 1
        assert result.results[1].score == 1.0
        assert result.results[1].tag_names == ["cars", "trucks"]

    @pytest.mark.asyncio
    async def test_search_by_ids_in_my_posts(self, unit_env):
        tag_service = await unit_env.get(TagService)
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(SearchPostsUseCase)
        (cars,) = await tag_service.ensure_tags(["cars"])
        mine = make_post([cars.id], year=1980)
        theirs = make_post([cars.id], year=1980)
        for post in (mine, theirs):
            await post_repo.save(post)

        result = await use_case.execute(
            SearchPostsRequest(
                user_id=str(mine.owner_id),
                year=1980,
                weights={str(cars.id): 0.7},
                keyed_by=TagKeyKind.ID,
                scope="mine",
            )
        )

        assert [r.post_id for r in result.results] == [str(mine.id)]

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            SearchPostsRequest(user_id=str(uuid4()), year=1973, weights={"cars": -1})
