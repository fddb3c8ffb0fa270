"""In-memory user repository for testing."""

from typing import Collection, Optional

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import Email


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[Email, User] = {}
        # Number of batch lookups served, lets tests assert on query fan-out
        self.batch_lookups = 0

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        return self._users.get(email)

    async def find_by_emails(self, emails: Collection[Email]) -> list[User]:
        """Find users for a batch of emails."""
        self.batch_lookups += 1
        return [self._users[email] for email in emails if email in self._users]

    async def save(self, user: User) -> User:
        """Save a user, keyed by email."""
        self._users[user.email] = user
        return user
