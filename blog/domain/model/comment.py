"""Comment domain models."""

from datetime import datetime

from pydantic import Field

from blog.domain.value import CommentId, Email

from .common import DomainModel


class Comment(DomainModel):
    """Comment entity.

    A node in a post's reply tree. Replies nest to any depth and keep their
    insertion order. Fields are frozen but the ``replies`` list is owned by the
    tree engine, which appends to and removes from it in place.
    """

    id: CommentId
    author_email: Email
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    replies: list["Comment"] = Field(default_factory=list)


class CommentView(DomainModel):
    """Read-only rendering of a comment with the author resolved to a display name."""

    id: CommentId
    author_name: str
    content: str
    created_at: datetime
    replies: list["CommentView"] = Field(default_factory=list)
