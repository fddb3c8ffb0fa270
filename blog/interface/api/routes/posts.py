"""Post routes."""

import base64
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostView,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.interface.error import http_error

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIRequest(BaseModel):
    """API request for creating or updating a post."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    code_language: str | None = Field(default=None, max_length=50)
    code_snippet: str | None = None
    image: str | None = None  # base64, omitted to keep the current image on update


def _decode_image(image: str | None) -> bytes | None:
    if image is None:
        return None
    try:
        return base64.b64decode(image, validate=True)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Image must be base64 encoded",
        )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    author_email: str | None = Query(default=None),
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListPostsResponse:
    """List posts, newest first, optionally by one author.

    Args:
        list_posts_use_case: List posts use case from DI
        author_email: Only posts by this author
        limit: Page size
        offset: Number of posts to skip

    Returns:
        Post summaries
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(author_email=author_email, limit=limit, offset=offset)
    )


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Create a new post as the current user.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    caller_email = jwt_service.get_email_from_token(auth_token)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                caller_email=caller_email,
                title=request.title,
                content=request.content,
                code_language=request.code_language,
                code_snippet=request.code_snippet,
                image=_decode_image(request.image),
            )
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Post creation failed", error=str(e))
        raise http_error(e)


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a post with its comment thread.

    Every author is shown by display name only.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI

    Returns:
        Rendered post

    Raises:
        HTTPException: If the post does not exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))
    except DomainError as e:
        raise http_error(e)


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: UUID,
    request: PostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Update a post's title, content, code and image.

    Only the post author can edit. Comments are kept.

    Raises:
        HTTPException: If not authenticated, not authorized, or not found
    """
    caller_email = jwt_service.get_email_from_token(auth_token)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id),
                caller_email=caller_email,
                title=request.title,
                content=request.content,
                code_language=request.code_language,
                code_snippet=request.code_snippet,
                image=_decode_image(request.image),
            )
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Post update failed", post_id=str(post_id), error=str(e))
        raise http_error(e)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a post and its comments. Only the post author can delete.

    Raises:
        HTTPException: If not authenticated, not authorized, or not found
    """
    caller_email = jwt_service.get_email_from_token(auth_token)

    try:
        await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), caller_email=caller_email)
        )
    except DomainError as e:
        logfire.warn("Post deletion failed", post_id=str(post_id), error=str(e))
        raise http_error(e)
