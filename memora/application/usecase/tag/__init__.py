"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase, TagItem

__all__ = [
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TagItem",
]
