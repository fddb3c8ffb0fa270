"""Comment and reply routes.

Comments are posted and deleted as the current user, whose identity comes
from the ``auth_token`` cookie.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    AddReplyRequest,
    AddReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)
from blog.application.usecase.post import PostView
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.domain.value import Email
from blog.interface.error import http_error

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request for a comment or reply."""

    content: str = Field(min_length=1, max_length=10000)


def _require_caller(jwt_service: JWTService, auth_token: str | None, action: str) -> Email:
    caller_email = jwt_service.get_email_from_token(auth_token)
    if not caller_email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return caller_email


@router.post(
    "/{post_id}/comments",
    response_model=PostView,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: UUID,
    request: CommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Add a top-level comment to a post.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment content
        add_comment_use_case: Add comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Rendered updated post

    Raises:
        HTTPException: If not authenticated or the post does not exist
    """
    caller_email = _require_caller(jwt_service, auth_token, "add comments")

    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(
                post_id=str(post_id),
                caller_email=caller_email,
                author_email=caller_email,
                content=request.content,
            )
        )
    except DomainError as e:
        logfire.warn("Comment creation failed", post_id=str(post_id), error=str(e))
        raise http_error(e)


@router.post(
    "/{post_id}/comments/{comment_id}/replies",
    response_model=PostView,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    post_id: UUID,
    comment_id: UUID,
    request: CommentAPIRequest,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Reply to a comment or to another reply at any depth.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated or the post or parent does not exist
    """
    caller_email = _require_caller(jwt_service, auth_token, "reply to comments")

    try:
        return await add_reply_use_case.execute(
            AddReplyRequest(
                post_id=str(post_id),
                parent_id=str(comment_id),
                caller_email=caller_email,
                author_email=caller_email,
                content=request.content,
            )
        )
    except DomainError as e:
        logfire.warn(
            "Reply creation failed",
            post_id=str(post_id),
            parent_id=str(comment_id),
            error=str(e),
        )
        raise http_error(e)


@router.delete("/{post_id}/comments/{comment_id}", response_model=PostView)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Delete a comment with all of its replies.

    Only the comment author can delete.

    Raises:
        HTTPException: If not authenticated, not the author, or not found
    """
    caller_email = _require_caller(jwt_service, auth_token, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                post_id=str(post_id),
                comment_id=str(comment_id),
                caller_email=caller_email,
                author_email=caller_email,
            )
        )
    except DomainError as e:
        logfire.warn(
            "Comment deletion failed",
            post_id=str(post_id),
            comment_id=str(comment_id),
            error=str(e),
        )
        raise http_error(e)


@router.delete(
    "/{post_id}/comments/{comment_id}/replies/{reply_id}",
    response_model=PostView,
)
async def delete_reply(
    post_id: UUID,
    comment_id: UUID,
    reply_id: UUID,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Delete a reply under a comment, with all replies below it.

    Only the reply author can delete.

    Raises:
        HTTPException: If not authenticated, not the author, or not found
    """
    caller_email = _require_caller(jwt_service, auth_token, "delete replies")

    try:
        return await delete_reply_use_case.execute(
            DeleteReplyRequest(
                post_id=str(post_id),
                comment_id=str(comment_id),
                reply_id=str(reply_id),
                caller_email=caller_email,
                author_email=caller_email,
            )
        )
    except DomainError as e:
        logfire.warn(
            "Reply deletion failed",
            post_id=str(post_id),
            reply_id=str(reply_id),
            error=str(e),
        )
        raise http_error(e)
