"""Rendered post view shared by read and comment use cases."""

import base64
from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import CommentView, Post
from blog.domain.service import UserService, resolve_and_redact
from blog.domain.service.comment_render import display_name
from blog.domain.service.comment_tree import count_comments


class AuthorResponse(BaseModel):
    """Public author profile. Never carries the email."""

    name: str
    photo: str | None = None  # base64
    about: str | None = None
    linkedin: str | None = None
    github: str | None = None
    twitter: str | None = None


class CommentItem(BaseModel):
    """Comment item in response.

    Threads are sent flat, parents before their replies, so arbitrarily deep
    threads serialize without nesting.
    """

    comment_id: str
    parent_id: str | None
    depth: int  # 0 for top-level comments
    author_name: str
    content: str
    created_at: datetime


class PostView(BaseModel):
    """Post as shown to readers, with every author redacted to a display name."""

    post_id: str
    title: str
    content: str
    code_language: str | None
    code_snippet: str | None
    image: str | None  # base64
    author: AuthorResponse
    comments: list[CommentItem]  # Pre-order
    comment_count: int
    version: int
    created_at: datetime
    updated_at: datetime


def encode_image(data: bytes | None) -> str | None:
    return base64.b64encode(data).decode("ascii") if data is not None else None


def flatten_comments(views: list[CommentView]) -> list[CommentItem]:
    """Flatten a rendered comment forest into pre-order response items.

    Args:
        views: Rendered top-level comments

    Returns:
        Items in pre-order, each naming its parent and depth
    """
    items: list[CommentItem] = []
    stack: list[tuple[CommentView, str | None, int]] = [
        (view, None, 0) for view in reversed(views)
    ]

    while stack:
        view, parent_id, depth = stack.pop()
        items.append(
            CommentItem(
                comment_id=str(view.id),
                parent_id=parent_id,
                depth=depth,
                author_name=view.author_name,
                content=view.content,
                created_at=view.created_at,
            )
        )
        stack.extend((child, str(view.id), depth + 1) for child in reversed(view.replies))

    return items


async def render_post(post: Post, user_service: UserService) -> PostView:
    """Render a post for readers.

    All display names, the post author's included, come from one batch lookup.
    The author's profile fields come from their user record, if any.

    Args:
        post: Stored post
        user_service: User domain service

    Returns:
        Rendered post
    """
    comments, names = await resolve_and_redact(
        post.comments,
        user_service.resolve_display_names,
        extra_emails=[post.author_email],
    )

    profile = await user_service.find_by_email(post.author_email)
    author = AuthorResponse(name=display_name(names, post.author_email))
    if profile:
        author = AuthorResponse(
            name=author.name,
            photo=encode_image(profile.photo),
            about=profile.about,
            linkedin=profile.linkedin,
            github=profile.github,
            twitter=profile.twitter,
        )

    return PostView(
        post_id=str(post.id),
        title=post.title,
        content=post.content,
        code_language=post.code_language,
        code_snippet=post.code_snippet,
        image=encode_image(post.image),
        author=author,
        comments=flatten_comments(comments),
        comment_count=count_comments(post.comments),
        version=post.version,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )
