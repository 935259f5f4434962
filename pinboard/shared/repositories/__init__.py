"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]              ← Generic CRUD + write-time validation
         │
         ├── UserRepository                ← Email/username lookup and uniqueness
         ├── PinRepository                 ← Home feed, pins by owner
         ├── BoardRepository               ← Boards / public boards by owner
         └── CommentRepository             ← Comment trees and sibling order

    LinkRepository[LinkType]               ← One row per relation member
         │
         ├── UserFollowRepository          ← following / followers
         ├── PinSaveRepository             ← saved_pins / saved_by
         ├── PinLikeRepository             ← pin likes
         ├── CommentLikeRepository         ← comment likes
         ├── BoardPinRepository            ← ordered board pins
         └── BoardCollaboratorRepository   ← board collaborators

Usage Example:
==============
    from pinboard.shared.repositories import PinRepository, PinLikeRepository

    async def like(db: AsyncSession, pin_id: UUID, user_id: UUID):
        if not await PinRepository(db).exists(pin_id):
            raise PinNotFoundError(str(pin_id))
        await PinLikeRepository(db).add(pin_id, user_id)
"""

from pinboard.shared.repositories.base import BaseRepository, LinkRepository
from pinboard.shared.repositories.user_repository import UserRepository
from pinboard.shared.repositories.pin_repository import PinRepository
from pinboard.shared.repositories.board_repository import BoardRepository
from pinboard.shared.repositories.comment_repository import CommentRepository
from pinboard.shared.repositories.user_follow_repository import UserFollowRepository
from pinboard.shared.repositories.pin_save_repository import PinSaveRepository
from pinboard.shared.repositories.pin_like_repository import PinLikeRepository
from pinboard.shared.repositories.comment_like_repository import CommentLikeRepository
from pinboard.shared.repositories.board_pin_repository import BoardPinRepository
from pinboard.shared.repositories.board_collaborator_repository import BoardCollaboratorRepository

__all__ = [
    # Base classes
    "BaseRepository",
    "LinkRepository",
    # Entity repositories
    "UserRepository",
    "PinRepository",
    "BoardRepository",
    "CommentRepository",
    # Link repositories
    "UserFollowRepository",
    "PinSaveRepository",
    "PinLikeRepository",
    "CommentLikeRepository",
    "BoardPinRepository",
    "BoardCollaboratorRepository",
]
