"""SQLAlchemy table definitions for the blog.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, Integer, LargeBinary, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (public profile, resolved for author display names)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("name", String(100), nullable=False),
    Column("photo", LargeBinary, nullable=True),
    Column("about", Text, nullable=True),
    Column("linkedin", Text, nullable=True),
    Column("github", Text, nullable=True),
    Column("twitter", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE (comment tree stored inline, see mappers.comments_to_records)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("author_email", String(255), nullable=False),
    Column("code_language", String(50), nullable=True),
    Column("code_snippet", Text, nullable=True),
    Column("image", LargeBinary, nullable=True),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column("version", Integer, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_email", posts_table.c.author_email)
Index("idx_posts_created_at", posts_table.c.created_at.desc())
