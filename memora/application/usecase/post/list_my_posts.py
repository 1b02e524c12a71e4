"""List the caller's posts use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from memora.application.usecase.post.view import PostView
from memora.domain.service import MediaService, PostService, TagService
from memora.domain.value import UserId


class ListMyPostsRequest(BaseModel):
    """List my posts request."""

    user_id: str


class ListMyPostsResponse(BaseModel):
    """List my posts response."""

    posts: list[PostView]


class ListMyPostsUseCase:
    """Use case for listing the posts a user created, with media URLs."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        media_service: MediaService,
    ) -> None:
        self.post_service = post_service
        self.tag_service = tag_service
        self.media_service = media_service

    async def execute(self, request: ListMyPostsRequest) -> ListMyPostsResponse:
        """Execute list my posts flow.

        Args:
            request: List my posts request

        Returns:
            The user's posts, newest first
        """
        with logfire.span("list_my_posts.execute", user_id=request.user_id):
            posts = await self.post_service.list_by_owner(UserId(UUID(request.user_id)))

            tag_names = await self.tag_service.get_tag_names_by_ids(
                tag_id for post in posts for tag_id in post.tag_ids
            )
            urls = await self.media_service.resolve_urls(
                [post.media_ref for post in posts]
            )

            views = [
                PostView.build(post, tag_names, url) for post, url in zip(posts, urls)
            ]
            logfire.info("Own posts listed", count=len(views))
            return ListMyPostsResponse(posts=views)
