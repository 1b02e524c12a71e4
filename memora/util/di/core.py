"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from memora.config import SearchSettings, Settings, StorageSettings, TaggingSettings
from memora.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_search_settings(self, settings: Settings) -> SearchSettings:
        """Provide search settings."""
        return settings.search

    @provide(scope=Scope.APP)
    def provide_tagging_settings(self, settings: Settings) -> TaggingSettings:
        """Provide tag suggestion settings."""
        return settings.tagging

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide media storage settings."""
        return settings.storage
