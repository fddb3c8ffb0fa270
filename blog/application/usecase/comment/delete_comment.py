"""Delete comment and delete reply use cases."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.post.view import PostView, render_post
from blog.domain.service import CommentService, UserService, authorize
from blog.domain.value import CommentId, Email, PostId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    caller_email: str | None  # Identity from the caller's token
    author_email: str  # Identity the deletion is performed as


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    post_id: str  # UUID string
    comment_id: str  # Comment the reply sits under
    reply_id: str  # UUID string
    caller_email: str | None
    author_email: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and everything below it."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> PostView:
        """Execute delete comment flow.

        Steps:
        1. Verify the caller is acting as themselves
        2. Remove the comment subtree; CommentService also checks that
           the comment's stored author is that identity
        3. Render the updated post

        Args:
            request: Delete comment request

        Returns:
            Rendered updated post

        Raises:
            NotAuthenticatedError: If there is no caller identity
            NotAuthorizedError: If the caller is not the comment's author
            NotFoundError: If the post or the comment does not exist
        """
        author_email = Email(request.author_email)
        authorize(request.caller_email, author_email, "delete this comment")

        post = await self.comment_service.delete_comment(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            author_email=author_email,
        )

        return await render_post(post, self.user_service)


class DeleteReplyUseCase(BaseUseCase):
    """Use case for deleting a reply and everything below it."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize delete reply use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteReplyRequest) -> PostView:
        """Execute delete reply flow.

        Raises:
            NotAuthenticatedError: If there is no caller identity
            NotAuthorizedError: If the caller is not the reply's author
            NotFoundError: If the post, the comment or the reply does not exist
        """
        author_email = Email(request.author_email)
        authorize(request.caller_email, author_email, "delete this reply")

        post = await self.comment_service.delete_reply(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            reply_id=CommentId(UUID(request.reply_id)),
            author_email=author_email,
        )

        return await render_post(post, self.user_service)
