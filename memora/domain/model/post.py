"""Post aggregate root.

A post is a piece of user media (a photo or an audio clip) with a title,
a description, a set of tags and the year it belongs to.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from memora.domain.model.common import DomainModel
from memora.domain.value import MediaKind, MediaRef, PostId, TagId, UserId


class Post(DomainModel):
    """Post aggregate root.

    ``tag_ids`` keeps the order the owner gave; order carries no meaning for
    search. ``year`` is optional, a post without one never matches a
    year-bounded search.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=5000)
    tag_ids: list[TagId] = Field(default_factory=list)
    year: Optional[int] = None
    owner_id: UserId
    media_ref: Optional[MediaRef] = None
    media_kind: Optional[MediaKind] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_media(self) -> "Post":
        """A media kind only makes sense alongside a media reference."""
        if self.media_kind is not None and self.media_ref is None:
            raise ValueError("media_kind requires media_ref")
        return self
