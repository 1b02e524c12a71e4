"""Repository interfaces for the Memora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from memora.domain.repository.post import PostRepository
from memora.domain.repository.tag import TagRepository

__all__ = [
    "PostRepository",
    "TagRepository",
]
