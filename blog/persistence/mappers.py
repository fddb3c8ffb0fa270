"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.

A post's comment tree is stored as a flat pre-order list of records, each
naming its parent. Both directions are iterative, so thread depth is never
limited by the Python or JSON recursion limit.
"""

from datetime import datetime
from typing import Any, Dict, List
from uuid import UUID

from blog.domain.model import Comment, Post, User
from blog.domain.value import CommentId, Email, PostId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def comments_to_records(comments: List[Comment]) -> List[Dict[str, Any]]:
    """Flatten a comment forest into JSON-ready records, parents first.

    Args:
        comments: Top-level comments

    Returns:
        Records in pre-order, each with its ``parent_id`` (None at top level)
    """
    records: List[Dict[str, Any]] = []
    stack: list[tuple[Comment, CommentId | None]] = [
        (node, None) for node in reversed(comments)
    ]

    while stack:
        node, parent_id = stack.pop()
        records.append(
            {
                "id": str(node.id),
                "parent_id": str(parent_id) if parent_id else None,
                "author_email": node.author_email,
                "content": node.content,
                "created_at": node.created_at.isoformat(),
            }
        )
        stack.extend((child, node.id) for child in reversed(node.replies))

    return records


def records_to_comments(records: List[Dict[str, Any]]) -> List[Comment]:
    """Rebuild a comment forest from records written by ``comments_to_records``.

    Args:
        records: Records in pre-order

    Returns:
        Top-level comments with their replies attached

    Raises:
        ValueError: If a record refers to a parent not seen before it
    """
    roots: List[Comment] = []
    by_id: Dict[str, Comment] = {}

    for record in records:
        comment = Comment(
            id=CommentId(UUID(record["id"])),
            author_email=Email(record["author_email"]),
            content=record["content"],
            created_at=datetime.fromisoformat(record["created_at"]),
            replies=[],
        )
        by_id[record["id"]] = comment

        parent_id = record.get("parent_id")
        if parent_id is None:
            roots.append(comment)
            continue

        parent = by_id.get(parent_id)
        if parent is None:
            raise ValueError(
                f"Comment {record['id']} refers to unknown parent {parent_id}"
            )
        parent.replies.append(comment)

    return roots


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_email=Email(row["author_email"]),
        code_language=row.get("code_language"),
        code_snippet=row.get("code_snippet"),
        image=row.get("image"),
        comments=records_to_comments(row.get("comments") or []),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "author_email": post.author_email,
        "code_language": post.code_language,
        "code_snippet": post.code_snippet,
        "image": post.image,
        "comments": comments_to_records(post.comments),
        "version": post.version,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        name=row["name"],
        photo=row.get("photo"),
        about=row.get("about"),
        linkedin=row.get("linkedin"),
        github=row.get("github"),
        twitter=row.get("twitter"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()
