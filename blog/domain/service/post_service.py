"""Post domain service."""

from datetime import datetime

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import Email, PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post together with its comment tree.

        Args:
            post: Post to save

        Returns:
            Saved post with its new version

        Raises:
            ConcurrentModificationError: If the post changed since it was loaded
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), version=post.version
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id), version=saved.version)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(
        self,
        author_email: Email | None = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Post]:
        """List posts, newest first.

        Args:
            author_email: Only posts by this author (None for all)
            limit: Maximum number of posts
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        with logfire.span(
            "post_service.list_posts",
            by_author=author_email is not None,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_all(
                author_email=author_email, limit=limit, offset=offset
            )
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def update_post(
        self,
        post: Post,
        title: str,
        content: str,
        code_language: str | None,
        code_snippet: str | None,
        image: bytes | None = None,
    ) -> Post:
        """Replace a post's editable fields, keeping its comments.

        The image is only replaced when a new one is given.

        Args:
            post: Post as loaded
            title: New title
            content: New body text
            code_language: New code language (None to clear)
            code_snippet: New code snippet (None to clear)
            image: New image, or None to keep the current one

        Returns:
            Saved post
        """
        with logfire.span("post_service.update_post", post_id=str(post.id)):
            updated = Post(
                id=post.id,
                title=title,
                content=content,
                author_email=post.author_email,
                code_language=code_language,
                code_snippet=code_snippet,
                image=image if image is not None else post.image,
                comments=post.comments,
                version=post.version,
                created_at=post.created_at,
                updated_at=datetime.now(),
            )
            return await self.save_post(updated)

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post and its comment tree.

        Args:
            post_id: Post ID

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            if not deleted:
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))
