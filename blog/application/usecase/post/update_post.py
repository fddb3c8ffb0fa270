"""Update post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService, UserService, authorize
from blog.domain.value import PostId

from .view import PostView, render_post


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    caller_email: str | None  # Identity from the caller's token
    title: str
    content: str
    code_language: str | None = None
    code_snippet: str | None = None
    image: bytes | None = None  # None keeps the current image


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post. Comments are left untouched."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Steps:
        1. Load post (raises NotFoundError)
        2. Verify the caller is the post author
        3. Replace editable fields and save

        Args:
            request: Update post request

        Returns:
            Rendered updated post

        Raises:
            NotFoundError: If the post does not exist
            NotAuthenticatedError: If there is no caller identity
            NotAuthorizedError: If the caller is not the post author
        """
        with logfire.span("update_post.execute", post_id=request.post_id):
            post = await self.post_service.get_post(PostId(UUID(request.post_id)))

            authorize(request.caller_email, post.author_email, "update this post")

            updated = await self.post_service.update_post(
                post,
                title=request.title,
                content=request.content,
                code_language=request.code_language,
                code_snippet=request.code_snippet,
                image=request.image,
            )
            logfire.info("Post updated", post_id=request.post_id)

            return await render_post(updated, self.user_service)
