"""Suggest weights, then search."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from memora.application.usecase.search.search_posts import SearchScope
from memora.application.usecase.search.view import (
    SearchResults,
    WeightItem,
    build_results,
)
from memora.domain.error import ValidationError
from memora.domain.service import SearchService, TagService
from memora.domain.value import MediaRef, TagName, UserId


class SuggestAndSearchRequest(BaseModel):
    """Suggest-and-search request.

    Give ``query`` to suggest from text, or ``media_ref`` to suggest from a
    stored image.
    """

    user_id: str
    year: Optional[int] = None
    query: Optional[str] = None
    media_ref: Optional[str] = None
    scope: SearchScope = "all"


class SuggestAndSearchResponse(SearchResults):
    """Suggest-and-search response with the weights that were used."""

    weights: list[WeightItem]


class SuggestAndSearchUseCase:
    """Use case turning a text query or an image into a ranked search."""

    def __init__(self, search_service: SearchService, tag_service: TagService) -> None:
        """Initialize suggest-and-search use case.

        Args:
            search_service: Search domain service
            tag_service: Tag domain service
        """
        self.search_service = search_service
        self.tag_service = tag_service

    async def execute(self, request: SuggestAndSearchRequest) -> SuggestAndSearchResponse:
        """Execute suggest-and-search flow.

        Steps:
        1. Ask the tag suggester for weighted tags (text or stored image)
        2. Rank posts with those weights

        Args:
            request: Suggest-and-search request

        Returns:
            Suggested weights, strongest first, and ranked posts

        Raises:
            ValidationError: If neither or both of query and media_ref are given
            NotFoundError: If the media reference has no stored object
            TagSuggestionError: If the suggestion service fails
        """
        with logfire.span(
            "suggest_and_search.execute",
            query=request.query,
            media_ref=request.media_ref,
            year=request.year,
        ):
            weights: dict[TagName, float]
            if request.media_ref is not None:
                if request.query is not None:
                    raise ValidationError("Give either a text query or a media_ref")
                weights = await self.search_service.suggest_weights_for_image(
                    MediaRef(request.media_ref), request.year
                )
            else:
                weights = await self.search_service.suggest_weights(
                    query=request.query, year=request.year
                )

            owner_id = UserId(UUID(request.user_id)) if request.scope == "mine" else None
            hits = await self.search_service.search(
                request.query or "", request.year, weights, owner_id=owner_id
            )
            results = await build_results(hits, self.tag_service)

            items = sorted(
                (WeightItem(tag=name.root, weight=w) for name, w in weights.items()),
                key=lambda item: -item.weight,
            )
            return SuggestAndSearchResponse(results=results.results, weights=items)
