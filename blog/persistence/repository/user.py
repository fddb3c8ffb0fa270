"""PostgreSQL implementation of User repository."""

from typing import Collection, List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import Email
from blog.persistence.mappers import row_to_user, user_to_dict
from blog.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_emails(self, emails: Collection[Email]) -> List[User]:
        """Find users for a batch of emails in one query."""
        if not emails:
            return []

        stmt = select(users_table).where(users_table.c.email.in_(list(emails)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update by email).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.email],
            set_={
                key: stmt.excluded[key]
                for key in values
                if key not in ("id", "email", "created_at")
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
