"""initial_schema

Create the schema for the blog:
- Users (public profile used for author display names)
- Posts (comment thread stored inline as JSONB, versioned for optimistic locking)

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.create_table(
        "users",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("photo", sa.LargeBinary(), nullable=True),
        sa.Column("about", sa.Text(), nullable=True),
        sa.Column("linkedin", sa.Text(), nullable=True),
        sa.Column("github", sa.Text(), nullable=True),
        sa.Column("twitter", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "posts",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_email", sa.String(length=255), nullable=False),
        sa.Column("code_language", sa.String(length=50), nullable=True),
        sa.Column("code_snippet", sa.Text(), nullable=True),
        sa.Column("image", sa.LargeBinary(), nullable=True),
        # Flat pre-order list of {id, parent_id, author_email, content, created_at}
        sa.Column(
            "comments",
            postgresql.JSONB(),
            server_default=sa.text("'[]'::jsonb"),
            nullable=False,
        ),
        sa.Column("version", sa.Integer(), server_default="1", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "code_language IS NULL OR code_snippet IS NOT NULL",
            name="code_language_requires_snippet",
        ),
    )
    op.create_index("idx_posts_author_email", "posts", ["author_email"])
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_index("idx_posts_author_email", table_name="posts")
    op.drop_table("posts")
    op.drop_table("users")
