"""Authorization checks for post and comment mutations."""

import logfire

from blog.domain.error import NotAuthenticatedError, NotAuthorizedError
from blog.domain.value import Email


def authorize(acting_email: Email | None, required_email: Email, action: str) -> Email:
    """Check that the caller is the identity an operation requires.

    Creating content requires the caller to be the claimed author. Deleting or
    editing requires the caller to be the author of the content itself.

    Args:
        acting_email: Identity resolved from the caller's token, None if absent
        required_email: Identity the operation must be performed as
        action: Human readable action, used in error messages

    Returns:
        The acting identity

    Raises:
        NotAuthenticatedError: If there is no caller identity
        NotAuthorizedError: If the caller is someone else
    """
    if acting_email is None:
        raise NotAuthenticatedError(action)

    if acting_email != required_email:
        logfire.warn("Authorization denied", action=action)
        raise NotAuthorizedError(action, acting_email)

    return acting_email
