"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import Email, PostId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    A post is loaded and saved together with its entire comment tree.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        author_email: Optional[Email] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, newest first.

        Args:
            author_email: Restrict to posts by this author (None for all)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        The stored version must equal ``post.version``; the returned post
        carries the bumped version.

        Args:
            post: The post to save

        Returns:
            The saved post

        Raises:
            ConcurrentModificationError: If the post changed since it was loaded
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its comment tree.

        Args:
            post_id: The post's unique identifier

        Returns:
            True if a post was deleted, False if it did not exist
        """
        pass
