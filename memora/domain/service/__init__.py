"""Domain services."""

from .base import Service
from .media_service import MediaService, MediaStorage, StoredMedia
from .post_service import PostService
from .search_service import SearchHit, SearchService, TagSuggester
from .tag_service import TagService

__all__ = [
    "MediaService",
    "MediaStorage",
    "PostService",
    "SearchHit",
    "SearchService",
    "Service",
    "StoredMedia",
    "TagService",
    "TagSuggester",
]
