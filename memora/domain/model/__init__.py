"""Domain model entities for Memora."""

from memora.domain.model.post import Post
from memora.domain.model.tag import Tag

__all__ = [
    "Post",
    "Tag",
]
