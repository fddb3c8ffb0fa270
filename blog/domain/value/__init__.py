"""Domain value objects for the blog."""

from blog.domain.value.identifiers import CommentId, Email, PostId, UserId

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "Email",
]
