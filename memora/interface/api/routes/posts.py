"""Post routes."""

from typing import Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from memora.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    ListMyPostsRequest,
    ListMyPostsResponse,
    ListMyPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from memora.application.usecase.post.create_post import MAX_YEAR, MIN_YEAR
from memora.domain.value import MediaKind
from memora.interface.api.errors import to_http_exception
from memora.interface.api.identity import current_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=5000)
    tag_names: list[str] = Field(default_factory=list, max_length=50)
    year: Optional[int] = Field(default=None, ge=MIN_YEAR, le=MAX_YEAR)
    media_ref: Optional[str] = None
    media_kind: Optional[MediaKind] = None


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    user_id: UUID = Depends(current_user_id),
) -> CreatePostResponse:
    """Create a new post.

    Tags are given by name and created on first use.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        user_id: Caller's user ID

    Returns:
        Created post details
    """
    try:
        use_case_request = CreatePostRequest(
            owner_id=str(user_id),
            **request.model_dump(),
        )
        return await create_post_use_case.execute(use_case_request)
    except Exception as e:
        raise to_http_exception(e, "create post") from e


class UpdatePostAPIRequest(BaseModel):
    """API request for patching a post. Omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    description: Optional[str] = Field(default=None, max_length=5000)
    tag_names: Optional[list[str]] = Field(default=None, max_length=50)
    year: Optional[int] = Field(default=None, ge=MIN_YEAR, le=MAX_YEAR)
    media_ref: Optional[str] = None
    media_kind: Optional[MediaKind] = None


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    user_id: UUID = Depends(current_user_id),
) -> UpdatePostResponse:
    """Patch a post. Only the owner can edit.

    Args:
        post_id: Post UUID
        request: Changed fields
        update_post_use_case: Update post use case from DI
        user_id: Caller's user ID

    Returns:
        Updated post details
    """
    with logfire.span("api.update_post", post_id=str(post_id)):
        try:
            use_case_request = UpdatePostRequest(
                post_id=str(post_id),
                user_id=str(user_id),
                **request.model_dump(exclude_unset=True),
            )
            return await update_post_use_case.execute(use_case_request)
        except Exception as e:
            raise to_http_exception(e, "update post") from e


@router.get("/mine", response_model=ListMyPostsResponse)
async def list_my_posts(
    use_case: FromDishka[ListMyPostsUseCase],
    user_id: UUID = Depends(current_user_id),
) -> ListMyPostsResponse:
    """List the caller's posts, newest first, with media URLs."""
    try:
        return await use_case.execute(ListMyPostsRequest(user_id=str(user_id)))
    except Exception as e:
        raise to_http_exception(e, "list posts") from e
