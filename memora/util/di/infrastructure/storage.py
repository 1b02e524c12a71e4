"""Media storage infrastructure providers."""

from dishka import Scope, provide

from memora.adapter.storage.local import LocalMediaStorage
from memora.config import Settings
from memora.domain.service import MediaStorage
from memora.util.di.base import ProviderBase
from memora.util.error import ConfigurationError

DEFAULT_SIGNING_SECRET = "CHANGE_ME_IN_PRODUCTION"


class StorageProvider(ProviderBase):
    """Media storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production media storage provider using the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_media_storage(self, settings: Settings) -> MediaStorage:
        """Provide local media storage.

        Raises:
            ConfigurationError: If production still uses the default signing secret
        """
        storage = settings.storage
        if (
            settings.environment == "production"
            and storage.signing_secret == DEFAULT_SIGNING_SECRET
        ):
            raise ConfigurationError("STORAGE__SIGNING_SECRET must be set in production")

        return LocalMediaStorage(
            root_dir=storage.root_dir,
            public_base_url=storage.public_base_url,
            signing_secret=storage.signing_secret,
            url_ttl_seconds=storage.url_ttl_seconds,
        )
