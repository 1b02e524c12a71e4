"""Strongly typed identifiers for Memora domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
TagId = NewType("TagId", UUID)

# Opaque reference to a stored media object, issued by the media storage
MediaRef = NewType("MediaRef", str)
