"""SQLAlchemy Core tables.

Kept in step by hand with the Alembic revisions under ``migrations/``.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

metadata = MetaData()


def _primary_key() -> Column:
    return Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()")


def _timestamps() -> tuple[Column, Column]:
    """``created_at`` and ``updated_at``, both defaulting to now."""
    return tuple(
        Column(name, TIMESTAMP(timezone=True), nullable=False, server_default="NOW()")
        for name in ("created_at", "updated_at")
    )


# USERS
users_table = Table(
    "users",
    metadata,
    _primary_key(),
    Column("username", String(64), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    *_timestamps(),
)

# POSTS
posts_table = Table(
    "posts",
    metadata,
    _primary_key(),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=True),
    # No FK: a dangling author is reported when the feed is built
    Column("author_id", UUID, nullable=False),
    Column("upvoters", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvoters", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("score", Integer, nullable=False, server_default="0"),
    Column("version", Integer, nullable=False, server_default="0"),
    *_timestamps(),
    CheckConstraint("NOT (upvoters && downvoters)", name="votes_exclusive"),
    CheckConstraint(
        "score = cardinality(upvoters) - cardinality(downvoters)",
        name="score_matches_votes",
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# COMMENTS
comments_table = Table(
    "comments",
    metadata,
    _primary_key(),
    # Insertion order within a post
    Column("seq", BigInteger, Identity(), nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    *_timestamps(),
)

Index("idx_comments_post_id_seq", comments_table.c.post_id, comments_table.c.seq)
