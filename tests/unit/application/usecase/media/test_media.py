"""Unit tests for media use cases."""

import pytest

from memora.application.usecase.media import (
    GetMediaRequest,
    GetMediaUseCase,
    UploadMediaRequest,
    UploadMediaUseCase,
)
from memora.domain.error import InvalidSignatureError, ValidationError
from memora.domain.value import MediaKind
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUploadMediaUseCase:
    """Tests for UploadMediaUseCase."""

    @pytest.mark.asyncio
    async def test_upload_audio(self, unit_env):
        use_case = await unit_env.get(UploadMediaUseCase)

        result = await use_case.execute(
            UploadMediaRequest(data=b"RIFF....", content_type="audio/wav")
        )

        assert result.media_kind == MediaKind.AUDIO
        assert result.media_ref.endswith(".wav")
        assert result.media_url == f"memory://media/{result.media_ref}"

    @pytest.mark.asyncio
    async def test_unsupported_type(self, unit_env):
        use_case = await unit_env.get(UploadMediaUseCase)

        with pytest.raises(ValidationError, match="Unsupported"):
            await use_case.execute(
                UploadMediaRequest(data=b"GIF89a", content_type="image/gif")
            )


class TestGetMediaUseCase:
    """Tests for GetMediaUseCase."""

    @pytest.mark.asyncio
    async def test_get_uploaded(self, unit_env):
        upload = await unit_env.get(UploadMediaUseCase)
        use_case = await unit_env.get(GetMediaUseCase)
        uploaded = await upload.execute(
            UploadMediaRequest(data=b"\x89PNG", content_type="image/png")
        )

        result = await use_case.execute(
            GetMediaRequest(media_ref=uploaded.media_ref, expires=0, signature="")
        )

        assert result.data == b"\x89PNG"
        assert result.content_type == "image/png"

    @pytest.mark.asyncio
    async def test_unknown_ref_is_refused(self, unit_env):
        use_case = await unit_env.get(GetMediaUseCase)

        with pytest.raises(InvalidSignatureError):
            await use_case.execute(
                GetMediaRequest(media_ref="missing.png", expires=0, signature="")
            )
