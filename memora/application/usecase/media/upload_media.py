"""Upload media use case."""

import logfire
from pydantic import BaseModel

from memora.domain.service import MediaService
from memora.domain.value import MediaKind


class UploadMediaRequest(BaseModel):
    """Upload media request."""

    data: bytes
    content_type: str


class UploadMediaResponse(BaseModel):
    """Upload media response."""

    media_ref: str
    media_kind: MediaKind
    media_url: str | None


class UploadMediaUseCase:
    """Use case for storing an image or audio upload."""

    def __init__(self, media_service: MediaService) -> None:
        self.media_service = media_service

    async def execute(self, request: UploadMediaRequest) -> UploadMediaResponse:
        """Store the upload and return its reference.

        Raises:
            ValidationError: If the upload is empty, too large or of an unsupported type
        """
        with logfire.span(
            "upload_media.execute",
            content_type=request.content_type,
            size=len(request.data),
        ):
            media_ref, kind = await self.media_service.store(
                request.data, request.content_type
            )
            media_url = await self.media_service.resolve_url(media_ref)
            return UploadMediaResponse(
                media_ref=media_ref, media_kind=kind, media_url=media_url
            )
