"""Search routes."""

from typing import Annotated, Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from memora.application.usecase.search import (
    SearchPostsRequest,
    SearchPostsResponse,
    SearchPostsUseCase,
    SuggestAndSearchRequest,
    SuggestAndSearchResponse,
    SuggestAndSearchUseCase,
)
from memora.application.usecase.search.search_posts import SearchScope
from memora.domain.value import TagKeyKind
from memora.interface.api.errors import to_http_exception
from memora.interface.api.identity import current_user_id

router = APIRouter(prefix="/search", tags=["search"], route_class=DishkaRoute)


class SearchAPIRequest(BaseModel):
    """API request for a ranked search with explicit weights."""

    query: str = ""
    year: Optional[int] = None
    weights: dict[str, Annotated[float, Field(ge=0.0)]]
    keyed_by: TagKeyKind = TagKeyKind.NAME
    scope: SearchScope = "all"


@router.post("", response_model=SearchPostsResponse)
async def search_posts(
    request: SearchAPIRequest,
    use_case: FromDishka[SearchPostsUseCase],
    user_id: UUID = Depends(current_user_id),
) -> SearchPostsResponse:
    """Rank posts by year proximity, then by their best weighted tag.

    Example:
        POST /search
        {"year": 1973, "weights": {"cars": 1.0, "trucks": 0.9}}
    """
    with logfire.span(
        "api.search_posts", year=request.year, weighted_tags=len(request.weights)
    ):
        try:
            return await use_case.execute(
                SearchPostsRequest(user_id=str(user_id), **request.model_dump())
            )
        except Exception as e:
            raise to_http_exception(e, "search posts") from e


class SuggestAPIRequest(BaseModel):
    """API request for a text query search."""

    query: str = Field(min_length=1, max_length=1000)
    year: Optional[int] = None
    scope: SearchScope = "all"


@router.post("/suggest", response_model=SuggestAndSearchResponse)
async def suggest_and_search(
    request: SuggestAPIRequest,
    use_case: FromDishka[SuggestAndSearchUseCase],
    user_id: UUID = Depends(current_user_id),
) -> SuggestAndSearchResponse:
    """Turn a text query into weighted tags, then search with them."""
    with logfire.span("api.suggest_and_search", query=request.query):
        try:
            return await use_case.execute(
                SuggestAndSearchRequest(user_id=str(user_id), **request.model_dump())
            )
        except Exception as e:
            raise to_http_exception(e, "search posts") from e


class ImageSuggestAPIRequest(BaseModel):
    """API request for a search by example image."""

    media_ref: str = Field(min_length=1)
    year: Optional[int] = None
    scope: SearchScope = "all"


@router.post("/suggest/image", response_model=SuggestAndSearchResponse)
async def suggest_and_search_image(
    request: ImageSuggestAPIRequest,
    use_case: FromDishka[SuggestAndSearchUseCase],
    user_id: UUID = Depends(current_user_id),
) -> SuggestAndSearchResponse:
    """Turn an uploaded image into weighted tags, then search with them."""
    with logfire.span("api.suggest_and_search_image", media_ref=request.media_ref):
        try:
            return await use_case.execute(
                SuggestAndSearchRequest(user_id=str(user_id), **request.model_dump())
            )
        except Exception as e:
            raise to_http_exception(e, "search posts") from e
