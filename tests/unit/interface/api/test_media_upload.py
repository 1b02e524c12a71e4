"""Unit tests for bounded upload reads."""

import io

import pytest
from fastapi import UploadFile

from memora.domain.error import ValidationError
from memora.interface.api.routes.media import UPLOAD_CHUNK_BYTES, read_limited


class TestReadLimited:
    @pytest.mark.asyncio
    async def test_reads_whole_upload_within_limit(self):
        data = b"x" * (UPLOAD_CHUNK_BYTES * 2 + 10)
        upload = UploadFile(file=io.BytesIO(data))

        assert await read_limited(upload, len(data)) == data

    @pytest.mark.asyncio
    async def test_stops_reading_once_over_limit(self):
        source = io.BytesIO(b"x" * (UPLOAD_CHUNK_BYTES * 10))
        upload = UploadFile(file=source)

        with pytest.raises(ValidationError, match="exceeds"):
            await read_limited(upload, UPLOAD_CHUNK_BYTES + 1)

        assert source.tell() == UPLOAD_CHUNK_BYTES * 2
