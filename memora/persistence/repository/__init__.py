"""PostgreSQL repository implementations."""

from memora.persistence.repository.post import PostgresPostRepository
from memora.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresTagRepository",
]
