"""List posts use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService, UserService
from blog.domain.service.comment_render import display_name
from blog.domain.service.comment_tree import count_comments
from blog.domain.value import Email


class ListPostsRequest(BaseModel):
    """List posts request."""

    author_email: str | None = None
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class PostSummary(BaseModel):
    """Post summary for listings."""

    post_id: str
    title: str
    author_name: str
    code_language: str | None
    comment_count: int
    created_at: datetime
    updated_at: datetime


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostSummary]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Author names for the whole page are resolved in one batch.

        Args:
            request: List posts request

        Returns:
            Post summaries, newest first
        """
        with logfire.span("list_posts.execute", limit=request.limit, offset=request.offset):
            author_email = Email(request.author_email) if request.author_email else None
            posts = await self.post_service.list_posts(
                author_email=author_email, limit=request.limit, offset=request.offset
            )

            names = await self.user_service.resolve_display_names(
                {post.author_email for post in posts}
            )

            return ListPostsResponse(
                posts=[
                    PostSummary(
                        post_id=str(post.id),
                        title=post.title,
                        author_name=display_name(names, post.author_email),
                        code_language=post.code_language,
                        comment_count=count_comments(post.comments),
                        created_at=post.created_at,
                        updated_at=post.updated_at,
                    )
                    for post in posts
                ]
            )
