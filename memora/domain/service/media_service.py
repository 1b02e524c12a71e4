"""Media domain service."""

import asyncio
from typing import Optional, Sequence

import logfire

from memora.domain.error import InvalidSignatureError, ValidationError
from memora.domain.value import MediaKind, MediaRef
from memora.domain.value.common import ValueObject

from .base import Service


class StoredMedia(ValueObject):
    """Bytes of a stored media object with their MIME type."""

    data: bytes
    content_type: str


class MediaStorage:
    """Object storage interface for post media."""

    async def save(self, data: bytes, content_type: str) -> MediaRef:
        """Store a media object.

        Args:
            data: Raw bytes
            content_type: MIME type of the bytes

        Returns:
            Opaque reference to the stored object
        """
        raise NotImplementedError

    async def get_url(self, media_ref: MediaRef) -> Optional[str]:
        """Build a displayable URL for a stored object.

        Args:
            media_ref: Reference returned by ``save``

        Returns:
            URL, or None if the object does not exist
        """
        raise NotImplementedError

    async def load(self, media_ref: MediaRef) -> Optional[StoredMedia]:
        """Read a stored object back.

        Args:
            media_ref: Reference returned by ``save``

        Returns:
            Stored media, or None if the object does not exist
        """
        raise NotImplementedError

    def verify_signature(self, media_ref: MediaRef, expires: int, signature: str) -> bool:
        """Check a URL signature produced by ``get_url``.

        Args:
            media_ref: Reference in the URL
            expires: Expiry timestamp in the URL
            signature: Signature in the URL

        Returns:
            True if the signature matches and has not expired
        """
        raise NotImplementedError


class MediaService(Service):
    """Domain service for uploading and resolving post media."""

    def __init__(self, media_storage: MediaStorage, max_upload_bytes: int) -> None:
        """Initialize media service.

        Args:
            media_storage: Media storage backend
            max_upload_bytes: Largest accepted upload
        """
        self.media_storage = media_storage
        self.max_upload_bytes = max_upload_bytes

    @staticmethod
    def classify(content_type: str) -> MediaKind:
        """Determine the media kind of an upload.

        Args:
            content_type: MIME type of the upload

        Returns:
            Media kind

        Raises:
            ValidationError: If the type is not a supported image or audio type
        """
        kind = MediaKind.from_content_type(content_type)
        if kind is None:
            raise ValidationError(
                f"Unsupported media type {content_type!r}. "
                "Use .jpeg/.jpg/.png or .mp3/.wav."
            )
        return kind

    async def store(self, data: bytes, content_type: str) -> tuple[MediaRef, MediaKind]:
        """Validate and store an upload.

        Args:
            data: Raw bytes
            content_type: MIME type of the upload

        Returns:
            Media reference and media kind

        Raises:
            ValidationError: If the upload is empty, too large or of an unsupported type
        """
        with logfire.span(
            "media_service.store", content_type=content_type, size=len(data)
        ):
            kind = self.classify(content_type)
            if not data:
                raise ValidationError("Media upload is empty")
            if len(data) > self.max_upload_bytes:
                raise ValidationError(
                    f"Media upload exceeds {self.max_upload_bytes} bytes"
                )

            media_ref = await self.media_storage.save(data, content_type)
            logfire.info("Media stored", media_ref=media_ref, kind=kind.value)
            return media_ref, kind

    async def resolve_url(self, media_ref: Optional[MediaRef]) -> Optional[str]:
        """Resolve a media reference to a URL.

        Args:
            media_ref: Reference, may be None

        Returns:
            URL, or None when there is no reference or no stored object
        """
        if media_ref is None:
            return None
        url = await self.media_storage.get_url(media_ref)
        if url is None:
            logfire.warn("Media reference has no stored object", media_ref=media_ref)
        return url

    async def resolve_urls(
        self, media_refs: Sequence[Optional[MediaRef]]
    ) -> list[Optional[str]]:
        """Resolve many references concurrently.

        Args:
            media_refs: References, entries may be None

        Returns:
            URLs in the same order as ``media_refs``
        """
        with logfire.span("media_service.resolve_urls", count=len(media_refs)):
            return list(
                await asyncio.gather(*(self.resolve_url(ref) for ref in media_refs))
            )

    async def open_signed(
        self, media_ref: MediaRef, expires: int, signature: str
    ) -> Optional[StoredMedia]:
        """Load media for a signed URL.

        Args:
            media_ref: Reference in the URL
            expires: Expiry timestamp in the URL
            signature: Signature in the URL

        Returns:
            Stored media, or None if nothing is stored under the reference

        Raises:
            InvalidSignatureError: If the signature does not match or has expired
        """
        if not self.media_storage.verify_signature(media_ref, expires, signature):
            logfire.warn("Rejected media signature", media_ref=media_ref)
            raise InvalidSignatureError(f"Invalid or expired signature for {media_ref}")
        return await self.media_storage.load(media_ref)
