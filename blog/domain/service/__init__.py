"""Domain services."""

from .authorization import authorize
from .base import Service
from .comment_render import UNKNOWN_AUTHOR, resolve_and_redact
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import DisplayNameCache, UserService

__all__ = [
    "CommentService",
    "DisplayNameCache",
    "JWTService",
    "PostService",
    "Service",
    "UNKNOWN_AUTHOR",
    "UserService",
    "authorize",
    "resolve_and_redact",
]
