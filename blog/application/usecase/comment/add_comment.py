"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.post.view import PostView, render_post
from blog.domain.service import CommentService, UserService, authorize
from blog.domain.value import Email, PostId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str  # UUID string
    caller_email: str | None  # Identity from the caller's token
    author_email: str  # Identity the comment is posted as
    content: str


class AddCommentUseCase(BaseUseCase):
    """Use case for adding a top-level comment to a post."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> PostView:
        """Execute add comment flow.

        Steps:
        1. Verify the caller is posting as themselves
        2. Append the comment to the post's top level and save (via CommentService)
        3. Render the updated post

        Args:
            request: Add comment request

        Returns:
            Rendered updated post

        Raises:
            NotAuthenticatedError: If there is no caller identity
            NotAuthorizedError: If the caller is not the claimed author
            NotFoundError: If the post does not exist
        """
        author_email = Email(request.author_email)
        authorize(request.caller_email, author_email, "add this comment")

        post = await self.comment_service.add_comment(
            post_id=PostId(UUID(request.post_id)),
            author_email=author_email,
            content=request.content,
        )

        return await render_post(post, self.user_service)
