"""Shared configuration for posts and tags."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic base for entities.

    Changes go through ``model_copy(update=...)`` so the ranker and the
    stores can never see a half-edited post.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
