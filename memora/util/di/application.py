"""Application layer DI providers."""

from dishka import Scope, provide

from memora.application.usecase.media import GetMediaUseCase, UploadMediaUseCase
from memora.application.usecase.post import (
    CreatePostUseCase,
    ListMyPostsUseCase,
    UpdatePostUseCase,
)
from memora.application.usecase.search import (
    SearchPostsUseCase,
    SuggestAndSearchUseCase,
)
from memora.application.usecase.tag import CreateTagUseCase, ListTagsUseCase
from memora.domain.service import MediaService, PostService, SearchService, TagService
from memora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)

    @provide
    def get_create_post_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        media_service: MediaService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            tag_service=tag_service,
            media_service=media_service,
        )

    @provide
    def get_update_post_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        media_service: MediaService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            tag_service=tag_service,
            media_service=media_service,
        )

    @provide
    def get_list_my_posts_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        media_service: MediaService,
    ) -> ListMyPostsUseCase:
        """Provide list my posts use case."""
        return ListMyPostsUseCase(
            post_service=post_service,
            tag_service=tag_service,
            media_service=media_service,
        )

    @provide
    def get_upload_media_use_case(
        self, media_service: MediaService
    ) -> UploadMediaUseCase:
        """Provide upload media use case."""
        return UploadMediaUseCase(media_service=media_service)

    @provide
    def get_get_media_use_case(self, media_service: MediaService) -> GetMediaUseCase:
        """Provide get media use case."""
        return GetMediaUseCase(media_service=media_service)

    @provide
    def get_search_posts_use_case(
        self, search_service: SearchService, tag_service: TagService
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(
            search_service=search_service, tag_service=tag_service
        )

    @provide
    def get_suggest_and_search_use_case(
        self, search_service: SearchService, tag_service: TagService
    ) -> SuggestAndSearchUseCase:
        """Provide suggest-and-search use case."""
        return SuggestAndSearchUseCase(
            search_service=search_service, tag_service=tag_service
        )
