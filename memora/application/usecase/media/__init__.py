"""Media use cases."""

from .get_media import GetMediaRequest, GetMediaResponse, GetMediaUseCase
from .upload_media import UploadMediaRequest, UploadMediaResponse, UploadMediaUseCase

__all__ = [
    "GetMediaRequest",
    "GetMediaResponse",
    "GetMediaUseCase",
    "UploadMediaRequest",
    "UploadMediaResponse",
    "UploadMediaUseCase",
]
