"""Unit tests for UpdatePostUseCase."""

from uuid import uuid4

import pytest

from memora.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from memora.domain.error import NotAuthorizedError, NotFoundError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create(unit_env, owner_id: str, **fields):
    use_case = await unit_env.get(CreatePostUseCase)
    return await use_case.execute(
        CreatePostRequest(owner_id=owner_id, title="Original", **fields)
    )


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_owner_updates_tags_and_year(self, unit_env):
        owner_id = str(uuid4())
        created = await _create(unit_env, owner_id, tag_names=["cars"], year=1970)
        use_case = await unit_env.get(UpdatePostUseCase)

        result = await use_case.execute(
            UpdatePostRequest(
                post_id=created.post_id,
                user_id=owner_id,
                tag_names=["Trucks", "cars"],
                year=1971,
            )
        )

        assert result.tag_names == ["trucks", "cars"]
        assert result.year == 1971
        assert result.title == "Original"
        assert result.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_explicit_none_clears_year(self, unit_env):
        owner_id = str(uuid4())
        created = await _create(unit_env, owner_id, year=1970)
        use_case = await unit_env.get(UpdatePostUseCase)

        result = await use_case.execute(
            UpdatePostRequest(post_id=created.post_id, user_id=owner_id, year=None)
        )

        assert result.year is None

    @pytest.mark.asyncio
    async def test_other_user_is_refused(self, unit_env):
        created = await _create(unit_env, str(uuid4()))
        use_case = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=created.post_id, user_id=str(uuid4()), title="Mine now"
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdatePostRequest(post_id=str(uuid4()), user_id=str(uuid4()))
            )
