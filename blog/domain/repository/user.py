"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional

from blog.domain.model.user import User
from blog.domain.value import Email


class UserRepository(ABC):
    """Repository for user profiles."""

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Args:
            email: The user's email

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_emails(self, emails: Collection[Email]) -> List[User]:
        """Find all users whose email is in ``emails`` in a single query.

        Emails without a matching user are simply absent from the result.

        Args:
            emails: Emails to look up

        Returns:
            Matching users in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
