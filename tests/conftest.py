"""Test configuration and shared builders."""

from datetime import datetime, timedelta
from uuid import uuid4

from blog.domain.model import Comment, Post, User
from blog.domain.value import CommentId, Email, PostId, UserId


def make_comment(
    author_email: str = "a@x.com",
    content: str = "A comment",
    replies: list[Comment] | None = None,
) -> Comment:
    """Build a comment with a fresh ID."""
    return Comment(
        id=CommentId(uuid4()),
        author_email=Email(author_email),
        content=content,
        created_at=datetime.now(),
        replies=replies or [],
    )


def make_chain(depth: int, author_email: str = "a@x.com") -> list[Comment]:
    """Build a single thread where each comment replies to the previous one.

    Built iteratively so depth is not limited by recursion.

    Returns:
        The top-level list holding the chain's first comment
    """
    root = make_comment(author_email, "level 0")
    current = root
    for level in range(1, depth):
        reply = make_comment(author_email, f"level {level}")
        current.replies.append(reply)
        current = reply
    return [root]


def chain_ids(comments: list[Comment]) -> list[CommentId]:
    """IDs along a single-reply chain, top to bottom."""
    ids = []
    node = comments[0] if comments else None
    while node is not None:
        ids.append(node.id)
        node = node.replies[0] if node.replies else None
    return ids


def make_post(
    author_email: str = "owner@x.com",
    comments: list[Comment] | None = None,
    title: str = "Iterative tree walks",
    created_at: datetime | None = None,
) -> Post:
    """Build an unsaved post."""
    now = created_at or datetime.now()
    return Post(
        id=PostId(uuid4()),
        title=title,
        content="Why explicit stacks beat recursion for deep threads.",
        author_email=Email(author_email),
        comments=comments or [],
        created_at=now,
        updated_at=now,
    )


def make_user(email: str, name: str, **profile) -> User:
    """Build a user profile."""
    return User(id=UserId(uuid4()), email=Email(email), name=name, **profile)


def days_ago(days: int) -> datetime:
    return datetime.now() - timedelta(days=days)
