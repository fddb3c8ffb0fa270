"""Comment tree operations.

A post's comments form an ordered forest: a list of top-level comments, each
holding an ordered list of replies, nested to any depth. Every walk here uses
an explicit stack instead of recursion, so a reply chain many thousands of
levels deep is handled like any other tree.

Traversal order is depth-first pre-order: a node is visited before its
replies, and replies are visited in stored order.
"""

from typing import Iterator

from blog.domain.error import NotFoundError
from blog.domain.model.comment import Comment
from blog.domain.value import CommentId

# (siblings, index) pins a node to the list that holds it, which is what removal needs
_Slot = tuple[list[Comment], int]


def _push_children(stack: list[_Slot], siblings: list[Comment]) -> None:
    # Reversed so the first sibling is popped first
    stack.extend((siblings, index) for index in range(len(siblings) - 1, -1, -1))


def _locate(comments: list[Comment], comment_id: CommentId) -> _Slot | None:
    stack: list[_Slot] = []
    _push_children(stack, comments)

    while stack:
        siblings, index = stack.pop()
        node = siblings[index]
        if node.id == comment_id:
            return siblings, index
        _push_children(stack, node.replies)

    return None


def iter_comments(comments: list[Comment]) -> Iterator[Comment]:
    """Yield every comment in the forest in pre-order.

    Args:
        comments: Top-level comments

    Yields:
        Each comment, parents before their replies
    """
    stack: list[_Slot] = []
    _push_children(stack, comments)

    while stack:
        siblings, index = stack.pop()
        node = siblings[index]
        yield node
        _push_children(stack, node.replies)


def count_comments(comments: list[Comment]) -> int:
    """Count every comment in the forest, replies included."""
    return sum(1 for _ in iter_comments(comments))


def find_comment(
    comments: list[Comment], comment_id: CommentId, resource: str = "Comment"
) -> Comment:
    """Find a comment anywhere in the forest.

    Args:
        comments: Top-level comments
        comment_id: Identifier to look for
        resource: Resource name used in the NotFoundError message

    Returns:
        The comment with that identifier

    Raises:
        NotFoundError: If no comment in the forest has that identifier
    """
    slot = _locate(comments, comment_id)
    if slot is None:
        raise NotFoundError(resource, str(comment_id))

    siblings, index = slot
    return siblings[index]


def insert_top_level(comments: list[Comment], comment: Comment) -> None:
    """Append a comment to the end of the top-level list."""
    comments.append(comment)


def insert_reply(
    comments: list[Comment], parent_id: CommentId, reply: Comment
) -> Comment:
    """Append a reply to the end of a comment's replies, at any depth.

    Args:
        comments: Top-level comments
        parent_id: Identifier of the comment being replied to
        reply: The new reply

    Returns:
        The parent comment

    Raises:
        NotFoundError: If the parent comment does not exist
    """
    parent = find_comment(comments, parent_id, resource="Parent comment")
    parent.replies.append(reply)
    return parent


def remove_comment(
    comments: list[Comment], comment_id: CommentId, resource: str = "Comment"
) -> Comment:
    """Remove a comment and all of its replies from wherever it sits.

    Args:
        comments: Top-level comments
        comment_id: Identifier of the comment to remove
        resource: Resource name used in the NotFoundError message

    Returns:
        The removed comment, still holding its subtree

    Raises:
        NotFoundError: If no comment in the forest has that identifier
    """
    slot = _locate(comments, comment_id)
    if slot is None:
        raise NotFoundError(resource, str(comment_id))

    siblings, index = slot
    return siblings.pop(index)
