"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import ConcurrentModificationError
from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import Email, PostId
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(dict(row))

    async def find_all(
        self,
        author_email: Optional[Email] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, newest first."""
        with logfire.span(
            "post_repository.find_all",
            by_author=author_email is not None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table)

            if author_email is not None:
                stmt = stmt.where(posts_table.c.author_email == author_email)

            stmt = stmt.order_by(desc(posts_table.c.created_at)).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            posts = [row_to_post(dict(row)) for row in result.mappings().all()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Updates are conditional on the stored version, so a concurrent save
        that landed first makes this one fail instead of being overwritten.
        """
        with logfire.span(
            "post_repository.save", post_id=str(post.id), version=post.version
        ):
            saved = post.model_copy(update={"version": post.version + 1})
            values = post_to_dict(saved)

            if post.version == 0:
                logfire.info("Inserting new post", post_id=str(post.id))
                await self.session.execute(insert(posts_table).values(**values))
            else:
                stmt = (
                    update(posts_table)
                    .where(
                        posts_table.c.id == post.id,
                        posts_table.c.version == post.version,
                    )
                    .values(**values)
                )
                result = await self.session.execute(stmt)
                if result.rowcount == 0:
                    logfire.warn(
                        "Stale post save rejected",
                        post_id=str(post.id),
                        version=post.version,
                    )
                    raise ConcurrentModificationError(str(post.id), post.version)

            await self.session.flush()
            logfire.info("Post saved successfully", post_id=str(post.id))
            return saved

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = posts_table.delete().where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
