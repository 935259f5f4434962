"""
Pinboard SQLAlchemy Models

This package contains all database models for the Pinboard application.

Model Hierarchy:
================
    User
       ├── pins (Pin[])                      via pins.created_by
       ├── boards (Board[])                  via boards.created_by
       ├── following / followers             via UserFollow
       └── saved pins                        via PinSave

    Pin
       ├── likes                             via PinLike
       ├── saved_by                          via PinSave
       └── comments (Comment[])              via comments.pin_id, parent_id IS NULL
              ├── likes                      via CommentLike
              └── replies (Comment[])        via comments.parent_id

    Board
       ├── pins (ordered)                    via BoardPin
       └── collaborators                     via BoardCollaborator

Every bidirectional relation is stored exactly once, in a link table with a
composite primary key. Both directions are read from that one table.

Usage:
======
    from pinboard.shared.models import User, Pin, Board, Comment
"""

from pinboard.shared.models.base import Base, TimestampMixin
from pinboard.shared.models.enums import Category, MediaType
from pinboard.shared.models.user import User
from pinboard.shared.models.pin import Pin
from pinboard.shared.models.board import Board
from pinboard.shared.models.comment import Comment
from pinboard.shared.models.user_follow import UserFollow
from pinboard.shared.models.pin_like import PinLike
from pinboard.shared.models.pin_save import PinSave
from pinboard.shared.models.comment_like import CommentLike
from pinboard.shared.models.board_pin import BoardPin
from pinboard.shared.models.board_collaborator import BoardCollaborator

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "Category",
    "MediaType",
    # Entities
    "User",
    "Pin",
    "Board",
    "Comment",
    # Link tables
    "UserFollow",
    "PinLike",
    "PinSave",
    "CommentLike",
    "BoardPin",
    "BoardCollaborator",
]
