"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation needs a caller identity and none is available."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when the caller is not the identity an operation requires."""

    def __init__(self, action: str, email: str):
        self.action = action
        super().__init__(f"User {email} is not authorized to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConcurrentModificationError(DomainError):
    """Raised when a post was saved by someone else since it was loaded."""

    def __init__(self, post_id: str, expected_version: int):
        self.post_id = post_id
        self.expected_version = expected_version
        super().__init__(
            f"Post {post_id} was modified concurrently (expected version {expected_version})"
        )
