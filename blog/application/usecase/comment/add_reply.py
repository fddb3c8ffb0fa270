"""Add reply use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.post.view import PostView, render_post
from blog.domain.service import CommentService, UserService, authorize
from blog.domain.value import CommentId, Email, PostId


class AddReplyRequest(BaseModel):
    """Add reply request."""

    post_id: str  # UUID string
    parent_id: str  # Comment or reply being answered, at any depth
    caller_email: str | None  # Identity from the caller's token
    author_email: str  # Identity the reply is posted as
    content: str


class AddReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize add reply use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddReplyRequest) -> PostView:
        """Execute add reply flow.

        Steps:
        1. Verify the caller is posting as themselves
        2. Append the reply under its parent and save (via CommentService)
        3. Render the updated post

        Args:
            request: Add reply request

        Returns:
            Rendered updated post

        Raises:
            NotAuthenticatedError: If there is no caller identity
            NotAuthorizedError: If the caller is not the claimed author
            NotFoundError: If the post or the parent comment does not exist
        """
        author_email = Email(request.author_email)
        authorize(request.caller_email, author_email, "add this reply")

        post = await self.comment_service.add_reply(
            post_id=PostId(UUID(request.post_id)),
            parent_id=CommentId(UUID(request.parent_id)),
            author_email=author_email,
            content=request.content,
        )

        return await render_post(post, self.user_service)
