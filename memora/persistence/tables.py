"""SQLAlchemy table definitions for Memora.

These tables match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(64), nullable=False),  # Case-sensitive lookup key
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_tags_name", tags_table.c.name, unique=True)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("year", Integer, nullable=True),
    Column("owner_id", UUID, nullable=False),  # Users live with the identity provider
    Column("media_ref", String(255), nullable=True),
    Column("media_kind", String(16), nullable=True),  # 'image' | 'audio'
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_owner_id", posts_table.c.owner_id)

# ============================================================================
# POST_TAGS TABLE (junction table, position keeps the owner's tag order)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    # No foreign key: a deleted tag leaves a dangling id that ranks as weight 0
    Column("tag_id", UUID, nullable=False),
    Column("position", Integer, nullable=False),
    UniqueConstraint("post_id", "position", name="uq_post_tag_position"),
)

Index("idx_post_tags_post_id", post_tags_table.c.post_id)
Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)
