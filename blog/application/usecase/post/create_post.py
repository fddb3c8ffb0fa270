"""Create post use case."""

import logfire
from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.error import NotAuthenticatedError
from blog.domain.model.post import Post
from blog.domain.service import PostService, UserService
from blog.domain.value import PostId

from .view import PostView, render_post


class CreatePostRequest(BaseModel):
    """Create post request."""

    caller_email: str | None  # Identity from the caller's token
    title: str
    content: str
    code_language: str | None = None
    code_snippet: str | None = None
    image: bytes | None = None


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Require a caller identity; the caller becomes the author
        2. Create Post entity (validation happens in domain model)
        3. Save post via PostService

        Args:
            request: Create post request

        Returns:
            Rendered new post

        Raises:
            NotAuthenticatedError: If there is no caller identity
            ValidationError: If the post fields are invalid
        """
        if request.caller_email is None:
            raise NotAuthenticatedError("create a post")

        with logfire.span("create_post.execute", title=request.title):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                title=request.title,
                content=request.content,
                author_email=request.caller_email,
                code_language=request.code_language,
                code_snippet=request.code_snippet,
                image=request.image,
                comments=[],
                created_at=now,
                updated_at=now,
            )

            saved = await self.post_service.save_post(post)
            logfire.info("Post created", post_id=str(saved.id))

            return await render_post(saved, self.user_service)
