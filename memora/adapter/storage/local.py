"""Media storage backends.

``LocalMediaStorage`` keeps uploads on the local filesystem and hands out
HMAC-signed, expiring URLs served by the API's ``/media`` route.
"""

import asyncio
import hashlib
import hmac
import time
from pathlib import Path
from typing import Optional
from uuid import uuid4

import logfire

from memora.adapter.error import MediaStorageError
from memora.domain.service.media_service import MediaStorage, StoredMedia
from memora.domain.value import MediaRef

EXTENSIONS: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "audio/mpeg": "mp3",
    "audio/wav": "wav",
}
CONTENT_TYPES: dict[str, str] = {ext: mime for mime, ext in EXTENSIONS.items()}


def _mime(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()


class LocalMediaStorage(MediaStorage):
    """Filesystem media storage with signed URLs."""

    def __init__(
        self,
        root_dir: str | Path,
        public_base_url: str,
        signing_secret: str,
        url_ttl_seconds: int = 3600,
    ) -> None:
        """Initialize storage.

        Args:
            root_dir: Directory uploads are written to (created if missing)
            public_base_url: Base URL the API is reachable at
            signing_secret: HMAC key for URL signatures
            url_ttl_seconds: Lifetime of a signed URL
        """
        self.root_dir = Path(root_dir)
        self.public_base_url = public_base_url.rstrip("/")
        self.signing_secret = signing_secret.encode("utf-8")
        self.url_ttl_seconds = url_ttl_seconds

    def _path(self, media_ref: MediaRef) -> Optional[Path]:
        # References are "<hex>.<ext>", never paths
        name = Path(media_ref).name
        if name != media_ref or name.startswith("."):
            return None
        return self.root_dir / name

    def _sign(self, media_ref: MediaRef, expires: int) -> str:
        message = f"{media_ref}:{expires}".encode("utf-8")
        return hmac.new(self.signing_secret, message, hashlib.sha256).hexdigest()

    async def save(self, data: bytes, content_type: str) -> MediaRef:
        """Write the bytes to a fresh file."""
        ext = EXTENSIONS.get(_mime(content_type))
        if ext is None:
            raise MediaStorageError(f"Cannot store content type {content_type!r}")

        media_ref = MediaRef(f"{uuid4().hex}.{ext}")
        path = self.root_dir / media_ref

        def write() -> None:
            self.root_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)

        try:
            await asyncio.to_thread(write)
        except OSError as e:
            logfire.error("Writing media failed", path=str(path), error=str(e))
            raise MediaStorageError(f"Could not write media: {e}") from e

        logfire.info("Media written", media_ref=media_ref, size=len(data))
        return media_ref

    async def get_url(self, media_ref: MediaRef) -> Optional[str]:
        """Build a signed URL, or None if the file is missing."""
        path = self._path(media_ref)
        if path is None or not await asyncio.to_thread(path.is_file):
            return None

        expires = int(time.time()) + self.url_ttl_seconds
        signature = self._sign(media_ref, expires)
        return (
            f"{self.public_base_url}/media/{media_ref}"
            f"?expires={expires}&signature={signature}"
        )

    async def load(self, media_ref: MediaRef) -> Optional[StoredMedia]:
        """Read a stored file back."""
        path = self._path(media_ref)
        if path is None:
            return None

        try:
            data = await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            return None
        except OSError as e:
            logfire.error("Reading media failed", path=str(path), error=str(e))
            raise MediaStorageError(f"Could not read media: {e}") from e

        content_type = CONTENT_TYPES.get(
            path.suffix.lstrip("."), "application/octet-stream"
        )
        return StoredMedia(data=data, content_type=content_type)

    def verify_signature(self, media_ref: MediaRef, expires: int, signature: str) -> bool:
        """Check the HMAC in constant time and reject expired URLs."""
        if expires < int(time.time()):
            return False
        expected = self._sign(media_ref, expires)
        return hmac.compare_digest(expected, signature)


class InMemoryMediaStorage(MediaStorage):
    """In-memory media storage for testing.

    URLs use the ``memory://`` scheme and are not signed.
    """

    def __init__(self) -> None:
        self._objects: dict[MediaRef, StoredMedia] = {}

    async def save(self, data: bytes, content_type: str) -> MediaRef:
        ext = EXTENSIONS.get(_mime(content_type), "bin")
        media_ref = MediaRef(f"{uuid4().hex}.{ext}")
        self._objects[media_ref] = StoredMedia(
            data=data, content_type=_mime(content_type)
        )
        return media_ref

    async def get_url(self, media_ref: MediaRef) -> Optional[str]:
        if media_ref not in self._objects:
            return None
        return f"memory://media/{media_ref}"

    async def load(self, media_ref: MediaRef) -> Optional[StoredMedia]:
        return self._objects.get(media_ref)

    def verify_signature(self, media_ref: MediaRef, expires: int, signature: str) -> bool:
        return media_ref in self._objects
