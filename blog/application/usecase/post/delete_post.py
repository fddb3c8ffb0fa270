"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService, authorize
from blog.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    caller_email: str | None  # Identity from the caller's token


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post along with its comment thread."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Args:
            request: Delete post request

        Raises:
            NotFoundError: If the post does not exist
            NotAuthenticatedError: If there is no caller identity
            NotAuthorizedError: If the caller is not the post author
        """
        with logfire.span("delete_post.execute", post_id=request.post_id):
            post_id = PostId(UUID(request.post_id))
            post = await self.post_service.get_post(post_id)

            authorize(request.caller_email, post.author_email, "delete this post")

            await self.post_service.delete_post(post_id)
