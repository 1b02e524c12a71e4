"""Domain value objects for Memora.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import Union

from pydantic import Field, field_validator

from memora.domain.value.common import RootValueObject, ValueObject
from memora.domain.value.identifiers import TagId

UNKNOWN_TAG_NAME = "unknown"


class TagName(RootValueObject[str]):
    """Name of a tag, the registry's lookup key.

    Names are case-sensitive: "Cars" and "cars" are different tags.
    Surrounding whitespace is stripped, the result must be 1-64 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        v = v.strip()
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Tag name must be 1-64 characters")
        return v

    @staticmethod
    def normalize(raw: str) -> str:
        """Normalize user-typed tag text.

        Lowercases, joins words with hyphens and drops anything outside
        ``[a-z0-9-_]``. "Muscle Car!" becomes "muscle-car".

        Args:
            raw: Tag text as typed

        Returns:
            Normalized text, possibly empty
        """
        text = re.sub(r"\s+", "-", raw.strip().lower())
        return re.sub(r"[^a-z0-9\-_]", "", text)


# A tag as referenced by callers: either by name or by identifier.
# Resolved to TagId before ranking.
TagKey = Union[TagName, TagId]


class TagKeyKind(str, Enum):
    """How the keys of a weighted tag mapping are to be read."""

    NAME = "name"
    ID = "id"


class WeightedTag(ValueObject):
    """A tag suggestion with its relevance weight."""

    tag: str
    weight: float = Field(ge=0.0, le=1.0)


class MediaKind(str, Enum):
    """Kind of media attached to a post."""

    IMAGE = "image"
    AUDIO = "audio"

    @classmethod
    def from_content_type(cls, content_type: str) -> "MediaKind | None":
        """Map a MIME type to a media kind.

        Args:
            content_type: MIME type, parameters allowed ("audio/wav; codecs=1")

        Returns:
            Media kind, or None if the type is not supported
        """
        mime = content_type.split(";", 1)[0].strip().lower()
        return SUPPORTED_CONTENT_TYPES.get(mime)


SUPPORTED_CONTENT_TYPES: dict[str, MediaKind] = {
    "image/jpeg": MediaKind.IMAGE,
    "image/png": MediaKind.IMAGE,
    "audio/mpeg": MediaKind.AUDIO,
    "audio/wav": MediaKind.AUDIO,
}
