"""Search posts use case."""

from typing import Annotated, Literal, Mapping, Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from memora.application.usecase.search.view import SearchResults, build_results
from memora.domain.service import SearchService, TagService
from memora.domain.value import TagId, TagKey, TagKeyKind, TagName, UserId

SearchScope = Literal["all", "mine"]


def parse_weight_keys(
    weights: Mapping[str, float], keyed_by: TagKeyKind
) -> dict[TagKey, float]:
    """Read the keys of a client weight mapping as tag names or tag ids.

    Keys that are not a valid name or id are skipped, like unknown tags.

    Args:
        weights: Weight per raw key
        keyed_by: How to read the keys

    Returns:
        Weight per tag key
    """
    parsed: dict[TagKey, float] = {}
    skipped: list[str] = []
    for raw, weight in weights.items():
        try:
            key: TagKey = (
                TagId(UUID(raw)) if keyed_by == TagKeyKind.ID else TagName(raw)
            )
        except (ValueError, PydanticValidationError):
            skipped.append(raw)
            continue
        parsed[key] = max(weight, parsed.get(key, weight))
    if skipped:
        logfire.warn("Skipping unreadable weight keys", keys=skipped)
    return parsed


class SearchPostsRequest(BaseModel):
    """Search posts request."""

    user_id: str
    query: str = ""
    year: Optional[int] = None
    weights: dict[str, Annotated[float, Field(ge=0.0)]]
    keyed_by: TagKeyKind = TagKeyKind.NAME
    scope: SearchScope = "all"


class SearchPostsResponse(SearchResults):
    """Search posts response."""

    pass


class SearchPostsUseCase:
    """Use case for ranked search with caller-supplied weights."""

    def __init__(self, search_service: SearchService, tag_service: TagService) -> None:
        """Initialize search posts use case.

        Args:
            search_service: Search domain service
            tag_service: Tag domain service
        """
        self.search_service = search_service
        self.tag_service = tag_service

    async def execute(self, request: SearchPostsRequest) -> SearchPostsResponse:
        """Execute search flow.

        Args:
            request: Search request

        Returns:
            Ranked posts, best first
        """
        with logfire.span(
            "search_posts.execute",
            query=request.query,
            year=request.year,
            keyed_by=request.keyed_by.value,
            scope=request.scope,
        ):
            weights = parse_weight_keys(request.weights, request.keyed_by)
            owner_id = UserId(UUID(request.user_id)) if request.scope == "mine" else None

            hits = await self.search_service.search(
                request.query, request.year, weights, owner_id=owner_id
            )
            results = await build_results(hits, self.tag_service)
            return SearchPostsResponse(results=results.results)
