"""In-memory post repository for testing."""

from typing import Any, Optional

from blog.domain.error import ConcurrentModificationError
from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import Email, PostId
from blog.persistence.mappers import post_to_dict, row_to_post


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Posts are kept as mapped rows, the same shape the database stores, so a
    loaded post never shares its comment tree with the stored copy.
    """

    def __init__(self) -> None:
        self._rows: dict[PostId, dict[str, Any]] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        row = self._rows.get(post_id)
        return row_to_post(row) if row else None

    async def find_all(
        self,
        author_email: Optional[Email] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts, newest first."""
        rows = list(self._rows.values())

        if author_email is not None:
            rows = [row for row in rows if row["author_email"] == author_email]

        rows.sort(key=lambda row: row["created_at"], reverse=True)

        return [row_to_post(row) for row in rows[offset : offset + limit]]

    async def save(self, post: Post) -> Post:
        """Save a post, rejecting stale versions."""
        existing = self._rows.get(post.id)
        stored_version = existing["version"] if existing else 0

        if stored_version != post.version:
            raise ConcurrentModificationError(str(post.id), post.version)

        saved = post.model_copy(update={"version": post.version + 1})
        self._rows[post.id] = post_to_dict(saved)
        return saved

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._rows.pop(post_id, None) is not None
