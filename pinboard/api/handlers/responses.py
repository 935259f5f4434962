"""
Response Builders

Turn service views into response schemas. Shared by the handlers.
"""

from pinboard.shared.models.comment import Comment
from pinboard.shared.models.user import User
from pinboard.shared.schemas.board import BoardResponse
from pinboard.shared.schemas.comment import CommentResponse
from pinboard.shared.schemas.pin import MediaFile, PinDetailResponse, PinResponse
from pinboard.shared.schemas.user import UserDetailResponse, UserResponse
from pinboard.shared.services.board_service import BoardView
from pinboard.shared.services.comment_service import CommentView
from pinboard.shared.services.pin_service import PinView
from pinboard.shared.services.user_service import UserView


def _ids(values) -> list[str]:
    return [str(value) for value in values]


def build_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        first_name=user.first_name,
        surname=user.surname,
        full_name=user.full_name,
        email=user.email,
        username=user.username,
        bio=user.bio,
        profile_image=user.profile_image,
        created_at=user.created_at,
    )


def build_user_detail_response(view: UserView) -> UserDetailResponse:
    """User plus its derived collections, as id lists."""
    return UserDetailResponse(
        **build_user_response(view.user).model_dump(),
        created_pins=_ids(view.created_pin_ids),
        saved_pins=_ids(view.saved_pin_ids),
        boards=_ids(view.board_ids),
        public_boards=_ids(view.public_board_ids),
        following=_ids(view.following_ids),
        followers=_ids(view.follower_ids),
    )


def build_comment_response(view: CommentView) -> CommentResponse:
    comment = view.comment
    return CommentResponse(
        id=str(comment.id),
        text=comment.text,
        image=comment.image,
        created_by=str(comment.created_by),
        pin_id=str(comment.pin_id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        is_reply=comment.is_reply,
        likes=_ids(view.like_ids),
        replies=_ids(view.reply_ids),
        created_at=comment.created_at,
    )


def build_new_comment_response(comment: Comment) -> CommentResponse:
    """A comment that was just created has no likes or replies yet."""
    return build_comment_response(CommentView(comment=comment))


def build_pin_response(view: PinView) -> PinResponse:
    pin = view.pin
    return PinResponse(
        id=str(pin.id),
        title=pin.title,
        description=pin.description,
        file=MediaFile(file_id=pin.file_id, file_url=pin.file_url, file_type=pin.file_type),
        created_by=str(pin.created_by),
        category=pin.category,
        tags=list(pin.tags or []),
        likes=_ids(view.like_ids),
        saved_by=_ids(view.saved_by_ids),
        comments=_ids(view.comment_ids),
        created_at=pin.created_at,
        updated_at=pin.updated_at,
    )


def build_pin_detail_response(view: PinView, comment_views: list[CommentView]) -> PinDetailResponse:
    """Pin with its top-level comments expanded."""
    return PinDetailResponse(
        **build_pin_response(view).model_dump(),
        comment_details=[build_comment_response(comment_view) for comment_view in comment_views],
    )


def build_board_response(view: BoardView) -> BoardResponse:
    board = view.board
    return BoardResponse(
        id=str(board.id),
        title=board.title,
        description=board.description,
        created_by=str(board.created_by),
        category=board.category,
        tags=list(board.tags or []),
        pins=_ids(view.pin_ids),
        collaborators=_ids(view.collaborator_ids),
        is_secret=board.is_secret,
        created_at=board.created_at,
        updated_at=board.updated_at,
    )
