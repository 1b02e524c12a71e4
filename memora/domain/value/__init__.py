"""Domain value objects for Memora."""

from memora.domain.value.identifiers import MediaRef, PostId, TagId, UserId
from memora.domain.value.types import (
    SUPPORTED_CONTENT_TYPES,
    UNKNOWN_TAG_NAME,
    MediaKind,
    TagKey,
    TagKeyKind,
    TagName,
    WeightedTag,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "TagId",
    "MediaRef",
    # Types
    "TagName",
    "TagKey",
    "TagKeyKind",
    "WeightedTag",
    "MediaKind",
    "SUPPORTED_CONTENT_TYPES",
    "UNKNOWN_TAG_NAME",
]
