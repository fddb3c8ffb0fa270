"""User domain service."""

from typing import Collection

import logfire

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import Email
from blog.util.cache import TTLCache

from .base import Service


class DisplayNameCache(TTLCache[Email, str]):
    """Process-wide display names by email, shared across requests."""


class UserService(Service):
    """Domain service for user profiles and author name resolution."""

    def __init__(
        self,
        user_repository: UserRepository,
        name_cache: DisplayNameCache,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            name_cache: Shared display-name cache
        """
        self.user_repository = user_repository
        self.name_cache = name_cache

    async def find_by_email(self, email: Email) -> User | None:
        """Get user by email, or None if there is no such user."""
        with logfire.span("user_service.find_by_email"):
            return await self.user_repository.find_by_email(email)

    async def resolve_display_names(self, emails: Collection[Email]) -> dict[Email, str]:
        """Resolve a batch of emails to display names.

        Cached names are served directly; everything else is fetched with a
        single repository query. Emails with no matching user are left out of
        the result and are not cached, so a new user's name shows up at once.

        Args:
            emails: Emails to resolve

        Returns:
            Display names by email, only for known users
        """
        with logfire.span("user_service.resolve_display_names", requested=len(emails)):
            names = self.name_cache.get_many(emails)
            missing = [email for email in emails if email not in names]

            if missing:
                users = await self.user_repository.find_by_emails(missing)
                fetched = {user.email: user.name for user in users}
                self.name_cache.set_many(fetched)
                names.update(fetched)

            logfire.debug(
                "Display names resolved",
                cache_hits=len(emails) - len(missing),
                fetched=len(missing),
                unresolved=len(emails) - len(names),
            )
            return names
