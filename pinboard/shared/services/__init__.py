"""
Business Logic Services

Services hold the business rules and coordinate repositories.

Service Map:
============
    AccessGate          ← Caller resolution, board visibility, ownership
    EngagementService   ← Like toggles on pins and comments
    RelationService     ← Follow, save/unsave, comments and replies
    AuthService         ← Registration and login
    UserService         ← Account view, profiles, deletion
    PinService          ← Pin CRUD, home feed, created/saved pins
    BoardService        ← Board CRUD
    CommentService      ← Comment read/edit/delete

Usage:
======
    from pinboard.shared.services import RelationService

    result = await RelationService(db).follow_toggle(alice_id, bob_id)
"""

from pinboard.shared.services.access_gate import AccessGate
from pinboard.shared.services.engagement_service import EngagementService, ToggleResult
from pinboard.shared.services.relation_service import FollowResult, RelationService, SaveResult
from pinboard.shared.services.auth_service import AuthService
from pinboard.shared.services.pin_service import PaginatedPins, PinService, PinView
from pinboard.shared.services.user_service import UserService, UserView
from pinboard.shared.services.board_service import BoardService, BoardView
from pinboard.shared.services.comment_service import CommentService, CommentView

__all__ = [
    "AccessGate",
    "EngagementService",
    "ToggleResult",
    "RelationService",
    "FollowResult",
    "SaveResult",
    "AuthService",
    "UserService",
    "UserView",
    "PinService",
    "PinView",
    "PaginatedPins",
    "BoardService",
    "BoardView",
    "CommentService",
    "CommentView",
]
