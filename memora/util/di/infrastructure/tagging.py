"""Tag suggestion infrastructure providers."""

from dishka import Scope, provide

from memora.adapter.tagging.client import HttpTagSuggester
from memora.config import TaggingSettings
from memora.domain.service import TagSuggester
from memora.util.di.base import ProviderBase


class TaggingProvider(ProviderBase):
    """Tag suggestion component base."""

    __mock_component__ = "tagging"


class ProdTaggingProvider(TaggingProvider):
    """Production tag suggestion provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_tag_suggester(self, tagging_settings: TaggingSettings) -> TagSuggester:
        """Provide the HTTP tag suggestion client."""
        return HttpTagSuggester(
            base_url=tagging_settings.base_url,
            timeout_seconds=tagging_settings.timeout_seconds,
        )
