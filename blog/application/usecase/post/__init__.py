"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase, PostSummary
from .update_post import UpdatePostRequest, UpdatePostUseCase
from .view import AuthorResponse, CommentItem, PostView, flatten_comments, render_post

__all__ = [
    "AuthorResponse",
    "CommentItem",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostSummary",
    "PostView",
    "UpdatePostRequest",
    "UpdatePostUseCase",
    "flatten_comments",
    "render_post",
]
