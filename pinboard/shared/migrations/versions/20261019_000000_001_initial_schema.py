# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00

Tables created:
- users: Accounts
- pins: Media posts
- boards: Owned, optionally secret collections of pins
- comments: Comments and replies (parent_id NULL for top-level)
- user_follows: follower → followee
- pin_saves: user → saved pin
- pin_likes: pin → liking user
- comment_likes: comment → liking user
- board_pins: board → pin, ordered by position
- board_collaborators: board → collaborator

Enums created (SQLAlchemy stores member names):
- category: ART, PHOTOGRAPHY, DIY, FOOD, FASHION, TRAVEL, OTHER
- mediatype: IMAGE_JPEG, IMAGE_PNG, IMAGE_GIF, VIDEO_MP4, AUDIO_MPEG
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Enum types
category_enum = postgresql.ENUM(
    "ART",
    "PHOTOGRAPHY",
    "DIY",
    "FOOD",
    "FASHION",
    "TRAVEL",
    "OTHER",
    name="category",
    create_type=False,
)

media_type_enum = postgresql.ENUM(
    "IMAGE_JPEG",
    "IMAGE_PNG",
    "IMAGE_GIF",
    "VIDEO_MP4",
    "AUDIO_MPEG",
    name="mediatype",
    create_type=False,
)


def _timestamps() -> list:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def _fk(column: str, target: str, **kwargs) -> sa.Column:
    return sa.Column(
        column,
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey(target, ondelete="CASCADE"),
        **kwargs,
    )


def upgrade() -> None:
    """Upgrade database schema."""
    # Create enum types
    op.execute(
        "CREATE TYPE category AS ENUM "
        "('ART', 'PHOTOGRAPHY', 'DIY', 'FOOD', 'FASHION', 'TRAVEL', 'OTHER')"
    )
    op.execute(
        "CREATE TYPE mediatype AS ENUM "
        "('IMAGE_JPEG', 'IMAGE_PNG', 'IMAGE_GIF', 'VIDEO_MP4', 'AUDIO_MPEG')"
    )

    # Entities
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("surname", sa.String(100), nullable=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("bio", sa.String(160), nullable=False, server_default=""),
        sa.Column("profile_image", sa.Text(), nullable=False, server_default="default.jpg"),
        *_timestamps(),
    )

    op.create_table(
        "pins",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(100), nullable=False, server_default=""),
        sa.Column("description", sa.String(500), nullable=False, server_default=""),
        sa.Column("file_id", sa.Text(), nullable=False),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("file_type", media_type_enum, nullable=False, server_default="IMAGE_JPEG"),
        _fk("created_by", "users.id", nullable=False, index=True),
        sa.Column("category", category_enum, nullable=False, server_default="OTHER", index=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "boards",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False, server_default=""),
        _fk("created_by", "users.id", nullable=False, index=True),
        sa.Column("category", category_enum, nullable=False, server_default="OTHER"),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("is_secret", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("text", sa.String(300), nullable=False),
        _fk("created_by", "users.id", nullable=False, index=True),
        _fk("pin_id", "pins.id", nullable=False, index=True),
        _fk("parent_id", "comments.id", nullable=True, index=True),
        sa.Column("image", sa.Text(), nullable=False, server_default=""),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )

    # Link tables: one row per relation member
    op.create_table(
        "user_follows",
        _fk("follower_id", "users.id", primary_key=True),
        _fk("followee_id", "users.id", primary_key=True, index=True),
        *_timestamps(),
        sa.CheckConstraint("follower_id <> followee_id", name="ck_user_follows_no_self_follow"),
    )

    op.create_table(
        "pin_saves",
        _fk("user_id", "users.id", primary_key=True),
        _fk("pin_id", "pins.id", primary_key=True, index=True),
        *_timestamps(),
    )

    op.create_table(
        "pin_likes",
        _fk("pin_id", "pins.id", primary_key=True),
        _fk("user_id", "users.id", primary_key=True, index=True),
        *_timestamps(),
    )

    op.create_table(
        "comment_likes",
        _fk("comment_id", "comments.id", primary_key=True),
        _fk("user_id", "users.id", primary_key=True, index=True),
        *_timestamps(),
    )

    op.create_table(
        "board_pins",
        _fk("board_id", "boards.id", primary_key=True),
        _fk("pin_id", "pins.id", primary_key=True, index=True),
        sa.Column("position", sa.Integer(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "board_collaborators",
        _fk("board_id", "boards.id", primary_key=True),
        _fk("user_id", "users.id", primary_key=True, index=True),
        *_timestamps(),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("board_collaborators")
    op.drop_table("board_pins")
    op.drop_table("comment_likes")
    op.drop_table("pin_likes")
    op.drop_table("pin_saves")
    op.drop_table("user_follows")
    op.drop_table("comments")
    op.drop_table("boards")
    op.drop_table("pins")
    op.drop_table("users")
    op.execute("DROP TYPE mediatype")
    op.execute("DROP TYPE category")
