"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .add_reply import AddReplyRequest, AddReplyUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "AddReplyRequest",
    "AddReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
]
