"""Serve media use case."""

import logfire
from pydantic import BaseModel

from memora.domain.error import NotFoundError
from memora.domain.service import MediaService
from memora.domain.value import MediaRef


class GetMediaRequest(BaseModel):
    """Get media request, the parts of a signed media URL."""

    media_ref: str
    expires: int
    signature: str


class GetMediaResponse(BaseModel):
    """Get media response."""

    data: bytes
    content_type: str


class GetMediaUseCase:
    """Use case for serving media behind a signed URL."""

    def __init__(self, media_service: MediaService) -> None:
        self.media_service = media_service

    async def execute(self, request: GetMediaRequest) -> GetMediaResponse:
        """Check the URL signature and load the stored bytes.

        Raises:
            InvalidSignatureError: If the signature is wrong or expired
            NotFoundError: If nothing is stored under the reference
        """
        media_ref = MediaRef(request.media_ref)
        with logfire.span("get_media.execute", media_ref=media_ref):
            stored = await self.media_service.open_signed(
                media_ref, request.expires, request.signature
            )
            if stored is None:
                raise NotFoundError("Media", media_ref)
            return GetMediaResponse(data=stored.data, content_type=stored.content_type)
