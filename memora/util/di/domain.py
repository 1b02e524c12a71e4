"""Domain layer DI providers."""

from dishka import Scope, provide

from memora.config import SearchSettings, StorageSettings
from memora.domain.ranking import FilterPolicy, ScorePolicy
from memora.domain.repository import PostRepository, TagRepository
from memora.domain.service import (
    MediaService,
    MediaStorage,
    PostService,
    SearchService,
    TagService,
    TagSuggester,
)
from memora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_media_service(
        self, media_storage: MediaStorage, storage_settings: StorageSettings
    ) -> MediaService:
        """Provide media domain service."""
        return MediaService(
            media_storage=media_storage,
            max_upload_bytes=storage_settings.max_upload_bytes,
        )

    @provide
    def get_search_service(
        self,
        post_service: PostService,
        tag_service: TagService,
        media_service: MediaService,
        tag_suggester: TagSuggester,
        search_settings: SearchSettings,
    ) -> SearchService:
        """Provide search domain service with the configured ranking policies."""
        return SearchService(
            post_service=post_service,
            tag_service=tag_service,
            media_service=media_service,
            tag_suggester=tag_suggester,
            filter_policy=FilterPolicy(search_settings.filter_policy),
            score_policy=ScorePolicy(search_settings.score_policy),
            year_window=search_settings.year_window,
        )
