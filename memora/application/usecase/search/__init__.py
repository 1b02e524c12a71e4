"""Search use cases."""

from .search_posts import (
    SearchPostsRequest,
    SearchPostsResponse,
    SearchPostsUseCase,
    parse_weight_keys,
)
from .suggest_and_search import (
    SuggestAndSearchRequest,
    SuggestAndSearchResponse,
    SuggestAndSearchUseCase,
)
from .view import SearchResultItem, SearchResults, WeightItem

__all__ = [
    "SearchPostsRequest",
    "SearchPostsResponse",
    "SearchPostsUseCase",
    "SearchResultItem",
    "SearchResults",
    "SuggestAndSearchRequest",
    "SuggestAndSearchResponse",
    "SuggestAndSearchUseCase",
    "WeightItem",
    "parse_weight_keys",
]
