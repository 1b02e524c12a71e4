"""initial_schema

Create the schema for Memora:
- Tags (registry, unique by name)
- Posts (image/audio media with title, description and year)
- Post tags (ordered tag ids per post)

Revision ID: 3c1f7a9d2b64
Revises:
Create Date: 2026-10-19 10:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f7a9d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    # Unique: find-or-create relies on ON CONFLICT (name)
    op.create_index("idx_tags_name", "tags", ["name"], unique=True)

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("media_ref", sa.String(255), nullable=True),
        sa.Column("media_kind", sa.String(16), nullable=True),  # 'image', 'audio'
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "media_kind IS NULL OR media_kind IN ('image', 'audio')",
            name="check_posts_media_kind",
        ),
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_posts_owner_id", "posts", ["owner_id"])

    # ========================================================================
    # POST_TAGS table
    # ========================================================================
    op.create_table(
        "post_tags",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("post_id", "position", name="uq_post_tag_position"),
    )
    op.create_index("idx_post_tags_post_id", "post_tags", ["post_id"])
    op.create_index("idx_post_tags_tag_id", "post_tags", ["tag_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("post_tags")
    op.drop_table("posts")
    op.drop_table("tags")
