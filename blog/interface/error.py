"""Mapping of domain errors to HTTP responses."""

from fastapi import HTTPException, status

from blog.domain.error import (
    ConcurrentModificationError,
    DomainError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)


def http_error(error: DomainError | ValueError) -> HTTPException:
    """Build the HTTPException a failed use case should produce.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException carrying the error message
    """
    if isinstance(error, NotAuthenticatedError):
        code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(error, NotAuthorizedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ConcurrentModificationError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST

    return HTTPException(status_code=code, detail=str(error))
