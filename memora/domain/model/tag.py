"""Tag entity for labelling posts."""

from datetime import datetime

from pydantic import Field

from memora.domain.model.common import DomainModel
from memora.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are created lazily the first time a name is used and are unique by
    name across the registry.
    """

    id: TagId
    name: TagName
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
