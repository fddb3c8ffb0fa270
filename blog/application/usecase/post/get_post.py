"""Get post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService, UserService
from blog.domain.value import PostId

from .view import PostView, render_post


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase(BaseUseCase):
    """Use case for reading a post with its rendered comment thread."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post flow.

        Steps:
        1. Load post (raises NotFoundError)
        2. Resolve every author in one batch and render the comment tree

        Args:
            request: Get post request

        Returns:
            Rendered post

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("get_post.execute", post_id=request.post_id):
            post = await self.post_service.get_post(PostId(UUID(request.post_id)))
            return await render_post(post, self.user_service)
