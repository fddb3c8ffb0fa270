"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from blog.domain.error import NotAuthorizedError
from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.value import CommentId, Email, PostId

from .base import Service
from .comment_tree import (
    count_comments,
    find_comment,
    insert_reply,
    insert_top_level,
    remove_comment,
)
from .post_service import PostService


class CommentService(Service):
    """Domain service for comment operations.

    Comments have no storage of their own: every operation loads the post,
    changes its comment tree in memory and saves the whole post.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize comment service.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    def _new_comment(self, author_email: Email, content: str) -> Comment:
        return Comment(
            id=CommentId(uuid4()),
            author_email=author_email,
            content=content,
            created_at=datetime.now(),
            replies=[],
        )

    async def add_comment(
        self, post_id: PostId, author_email: Email, content: str
    ) -> Post:
        """Add a top-level comment to a post.

        Args:
            post_id: Post ID
            author_email: Author of the new comment
            content: Comment text

        Returns:
            Saved post

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("comment_service.add_comment", post_id=str(post_id)):
            post = await self.post_service.get_post(post_id)

            comment = self._new_comment(author_email, content)
            insert_top_level(post.comments, comment)

            saved = await self.post_service.save_post(post)
            logfire.info(
                "Comment added", post_id=str(post_id), comment_id=str(comment.id)
            )
            return saved

    async def add_reply(
        self,
        post_id: PostId,
        parent_id: CommentId,
        author_email: Email,
        content: str,
    ) -> Post:
        """Reply to a comment or reply at any depth.

        Args:
            post_id: Post ID
            parent_id: Comment being replied to
            author_email: Author of the new reply
            content: Reply text

        Returns:
            Saved post

        Raises:
            NotFoundError: If the post or the parent comment does not exist
        """
        with logfire.span(
            "comment_service.add_reply",
            post_id=str(post_id),
            parent_id=str(parent_id),
        ):
            post = await self.post_service.get_post(post_id)

            reply = self._new_comment(author_email, content)
            insert_reply(post.comments, parent_id, reply)

            saved = await self.post_service.save_post(post)
            logfire.info(
                "Reply added",
                post_id=str(post_id),
                parent_id=str(parent_id),
                reply_id=str(reply.id),
            )
            return saved

    async def delete_comment(
        self, post_id: PostId, comment_id: CommentId, author_email: Email
    ) -> Post:
        """Delete a comment and all of its replies.

        The comment may sit anywhere in the tree. ``author_email`` must be the
        comment's stored author.

        Args:
            post_id: Post ID
            comment_id: Comment to delete
            author_email: Identity the deletion is performed as

        Returns:
            Saved post

        Raises:
            NotFoundError: If the post or the comment does not exist
            NotAuthorizedError: If the comment belongs to someone else
        """
        with logfire.span(
            "comment_service.delete_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
        ):
            post = await self.post_service.get_post(post_id)

            target = find_comment(post.comments, comment_id)
            self._check_author(target, author_email, "delete this comment")

            removed = remove_comment(post.comments, comment_id)

            saved = await self.post_service.save_post(post)
            logfire.info(
                "Comment deleted",
                post_id=str(post_id),
                comment_id=str(comment_id),
                removed=count_comments([removed]),
            )
            return saved

    async def delete_reply(
        self,
        post_id: PostId,
        comment_id: CommentId,
        reply_id: CommentId,
        author_email: Email,
    ) -> Post:
        """Delete a reply, at any depth below the given comment.

        Args:
            post_id: Post ID
            comment_id: Comment the reply belongs under
            reply_id: Reply to delete
            author_email: Identity the deletion is performed as

        Returns:
            Saved post

        Raises:
            NotFoundError: If the post, the comment or the reply does not exist
            NotAuthorizedError: If the reply belongs to someone else
        """
        with logfire.span(
            "comment_service.delete_reply",
            post_id=str(post_id),
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            post = await self.post_service.get_post(post_id)

            parent = find_comment(post.comments, comment_id, resource="Parent comment")
            target = find_comment(parent.replies, reply_id, resource="Reply")
            self._check_author(target, author_email, "delete this reply")

            removed = remove_comment(parent.replies, reply_id, resource="Reply")

            saved = await self.post_service.save_post(post)
            logfire.info(
                "Reply deleted",
                post_id=str(post_id),
                reply_id=str(reply_id),
                removed=count_comments([removed]),
            )
            return saved

    @staticmethod
    def _check_author(comment: Comment, author_email: Email, action: str) -> None:
        # The caller was already matched against author_email; this matches
        # author_email against the stored author
        if comment.author_email != author_email:
            logfire.warn("Delete denied, not the author", comment_id=str(comment.id))
            raise NotAuthorizedError(action, author_email)
