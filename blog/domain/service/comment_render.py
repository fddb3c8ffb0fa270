"""Author resolution and redaction of comment trees.

Stored comments carry the author's email. Readers only ever see a display
name: the stored tree is rendered into a separate tree of ``CommentView``
nodes and is never modified.
"""

from typing import Awaitable, Callable, Iterable, Mapping

import logfire

from blog.domain.model.comment import Comment, CommentView
from blog.domain.value import CommentId, Email

from .comment_tree import iter_comments

UNKNOWN_AUTHOR = "Unknown"

# Batch display-name lookup; emails it cannot resolve are missing from the result
NameLookup = Callable[[set[Email]], Awaitable[Mapping[Email, str]]]


def collect_author_emails(comments: list[Comment]) -> set[Email]:
    """Collect the distinct author emails used anywhere in the forest."""
    return {comment.author_email for comment in iter_comments(comments)}


def redact_comments(
    comments: list[Comment], names: Mapping[Email, str]
) -> list[CommentView]:
    """Render a comment forest with emails replaced by display names.

    Builds bottom-up with an explicit stack: a node is rendered only after all
    of its replies have been, so each view can embed its finished children.

    Args:
        comments: Top-level stored comments (left untouched)
        names: Display names by email; missing emails render as "Unknown"

    Returns:
        Rendered top-level comments, same shape and order as the input
    """
    rendered: dict[CommentId, CommentView] = {}
    stack: list[tuple[Comment, bool]] = [(node, False) for node in reversed(comments)]

    while stack:
        node, children_done = stack.pop()

        if not children_done:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.replies))
            continue

        rendered[node.id] = CommentView(
            id=node.id,
            author_name=names.get(node.author_email, UNKNOWN_AUTHOR),
            content=node.content,
            created_at=node.created_at,
            replies=[rendered.pop(child.id) for child in node.replies],
        )

    return [rendered.pop(node.id) for node in comments]


async def resolve_and_redact(
    comments: list[Comment],
    lookup: NameLookup,
    extra_emails: Iterable[Email] = (),
) -> tuple[list[CommentView], dict[Email, str]]:
    """Resolve every author in the forest with one lookup and render it.

    Steps:
    1. Collect distinct author emails (plus ``extra_emails``)
    2. Resolve them with a single call to ``lookup``
    3. Render the forest bottom-up

    Args:
        comments: Top-level stored comments
        lookup: Batch email to display-name resolver
        extra_emails: Further emails to resolve in the same batch, e.g. the post author

    Returns:
        Rendered comments and the resolved names
    """
    with logfire.span("comment_render.resolve_and_redact"):
        emails = collect_author_emails(comments)
        emails.update(extra_emails)

        names = dict(await lookup(emails))
        logfire.debug(
            "Authors resolved", requested=len(emails), resolved=len(names)
        )

        return redact_comments(comments, names), names


def display_name(names: Mapping[Email, str], email: Email) -> str:
    """Look up one display name, falling back to "Unknown"."""
    return names.get(email, UNKNOWN_AUTHOR)
