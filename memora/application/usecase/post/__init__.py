"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .list_my_posts import ListMyPostsRequest, ListMyPostsResponse, ListMyPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase
from .view import PostView

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "ListMyPostsRequest",
    "ListMyPostsResponse",
    "ListMyPostsUseCase",
    "PostView",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
