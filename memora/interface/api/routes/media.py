"""Media routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status

from memora.application.usecase.media import (
    GetMediaRequest,
    GetMediaUseCase,
    UploadMediaRequest,
    UploadMediaResponse,
    UploadMediaUseCase,
)
from memora.config import StorageSettings
from memora.domain.error import ValidationError
from memora.interface.api.errors import to_http_exception
from memora.interface.api.identity import current_user_id

router = APIRouter(prefix="/media", tags=["media"], route_class=DishkaRoute)

UPLOAD_CHUNK_BYTES = 64 * 1024


async def read_limited(file: UploadFile, max_bytes: int) -> bytes:
    """Read an upload, giving up as soon as it exceeds ``max_bytes``.

    Raises:
        ValidationError: If the upload is larger than ``max_bytes``
    """
    chunks: list[bytes] = []
    total = 0
    while chunk := await file.read(UPLOAD_CHUNK_BYTES):
        total += len(chunk)
        if total > max_bytes:
            raise ValidationError(f"Media upload exceeds {max_bytes} bytes")
        chunks.append(chunk)
    return b"".join(chunks)


@router.post(
    "", response_model=UploadMediaResponse, status_code=status.HTTP_201_CREATED
)
async def upload_media(
    use_case: FromDishka[UploadMediaUseCase],
    storage_settings: FromDishka[StorageSettings],
    file: UploadFile = File(...),
    _user_id: UUID = Depends(current_user_id),
) -> UploadMediaResponse:
    """Upload an image (JPEG/PNG) or an audio clip (MP3/WAV).

    Returns:
        Reference to pass as ``media_ref`` when creating a post
    """
    with logfire.span("api.upload_media", filename=file.filename):
        try:
            data = await read_limited(file, storage_settings.max_upload_bytes)
            return await use_case.execute(
                UploadMediaRequest(
                    data=data,
                    content_type=file.content_type or "application/octet-stream",
                )
            )
        except Exception as e:
            raise to_http_exception(e, "upload media") from e


@router.get("/{media_ref}")
async def get_media(
    media_ref: str,
    use_case: FromDishka[GetMediaUseCase],
    expires: int = Query(...),
    signature: str = Query(...),
) -> Response:
    """Serve stored media behind a signed URL.

    Example:
        GET /media/3f2a...c1.jpg?expires=1760000000&signature=ab12...
    """
    try:
        result = await use_case.execute(
            GetMediaRequest(media_ref=media_ref, expires=expires, signature=signature)
        )
    except Exception as e:
        raise to_http_exception(e, "get media") from e
    return Response(content=result.data, media_type=result.content_type)
