"""
Pin Handler

Pin CRUD, feed, likes and saves.

    POST   /pins                   → Create a pin
    GET    /pins                   → Home feed (paginated, newest first)
    GET    /pins/created           → Pins the caller created
    GET    /pins/saved             → Pins the caller saved
    GET    /pins/{pin_id}          → Pin with its top-level comments
    PATCH  /pins/{pin_id}          → Partial update (author only)
    DELETE /pins/{pin_id}          → Delete (author only)
    POST   /pins/{pin_id}/like     → Like / unlike toggle
    POST   /pins/{pin_id}/save     → Save, optionally onto a board
    DELETE /pins/{pin_id}/save     → Unsave

Static paths are declared before /{pin_id} so they are matched first.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from pinboard.api.dependencies.auth import CurrentUserId
from pinboard.api.dependencies.pagination import get_pagination
from pinboard.api.dependencies.services import (
    get_comment_service,
    get_engagement_service,
    get_pin_service,
    get_relation_service,
)
from pinboard.api.handlers.responses import build_pin_detail_response, build_pin_response
from pinboard.shared.schemas.common import (
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
)
from pinboard.shared.schemas.pin import (
    LikeResponse,
    PinCreate,
    PinDetailResponse,
    PinResponse,
    PinUpdate,
    SavePinRequest,
    SaveResponse,
)
from pinboard.shared.services.comment_service import CommentService
from pinboard.shared.services.engagement_service import EngagementService
from pinboard.shared.services.pin_service import PinService
from pinboard.shared.services.relation_service import RelationService


router = APIRouter()


@router.post(
    "",
    response_model=PinResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_pin(
    request: PinCreate,
    current_user_id: CurrentUserId,
    pin_service: PinService = Depends(get_pin_service),
):
    """
    Create a pin from an already uploaded media file.

    Raises:
        400: Invalid data
    """
    view = await pin_service.create_pin(
        current_user_id,
        file_id=request.file.file_id,
        file_url=request.file.file_url,
        file_type=request.file.file_type,
        title=request.title,
        description=request.description,
        category=request.category,
        tags=request.tags,
    )
    return build_pin_response(view)


@router.get("", response_model=PaginatedResponse[PinResponse])
async def list_pins(
    current_user_id: CurrentUserId,
    pagination: PaginationParams = Depends(get_pagination),
    pin_service: PinService = Depends(get_pin_service),
):
    """Home feed, newest first."""
    result = await pin_service.list_pins(
        current_user_id,
        page=pagination.page,
        per_page=pagination.per_page,
    )
    return PaginatedResponse[PinResponse](
        data=[build_pin_response(view) for view in result.items],
        pagination=PaginationMeta.create(
            page=result.page,
            per_page=result.page_size,
            total=result.total,
        ),
    )


@router.get("/created", response_model=list[PinResponse])
async def list_created_pins(
    current_user_id: CurrentUserId,
    pin_service: PinService = Depends(get_pin_service),
):
    """Pins created by the authenticated user."""
    views = await pin_service.list_created(current_user_id)
    return [build_pin_response(view) for view in views]


@router.get("/saved", response_model=list[PinResponse])
async def list_saved_pins(
    current_user_id: CurrentUserId,
    pin_service: PinService = Depends(get_pin_service),
):
    """Pins saved by the authenticated user."""
    views = await pin_service.list_saved(current_user_id)
    return [build_pin_response(view) for view in views]


@router.get("/{pin_id}", response_model=PinDetailResponse)
async def get_pin(
    pin_id: UUID,
    current_user_id: CurrentUserId,
    pin_service: PinService = Depends(get_pin_service),
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    A pin with its top-level comments. Replies are reachable from their parent.

    Raises:
        404: No such pin
    """
    view = await pin_service.get_pin(current_user_id, pin_id)
    comment_views = [await comment_service.build_view(comment) for comment in view.comments]
    return build_pin_detail_response(view, comment_views)


@router.patch("/{pin_id}", response_model=PinResponse)
async def update_pin(
    pin_id: UUID,
    request: PinUpdate,
    current_user_id: CurrentUserId,
    pin_service: PinService = Depends(get_pin_service),
):
    """
    Partially update a pin. Omitted fields are unchanged.

    Raises:
        403: Not the author
        404: No such pin
    """
    view = await pin_service.update_pin(
        current_user_id,
        pin_id,
        title=request.title,
        description=request.description,
        category=request.category,
        tags=request.tags,
    )
    return build_pin_response(view)


@router.delete("/{pin_id}", response_model=MessageResponse)
async def delete_pin(
    pin_id: UUID,
    current_user_id: CurrentUserId,
    pin_service: PinService = Depends(get_pin_service),
):
    """
    Raises:
        403: Not the author
        404: No such pin
    """
    await pin_service.delete_pin(current_user_id, pin_id)
    return MessageResponse(message="Deleted pin successfully")


@router.post("/{pin_id}/like", response_model=LikeResponse)
async def like_pin(
    pin_id: UUID,
    current_user_id: CurrentUserId,
    engagement_service: EngagementService = Depends(get_engagement_service),
):
    """
    Like the pin, or unlike it if already liked.

    Raises:
        404: No such pin
    """
    result = await engagement_service.like_pin(current_user_id, pin_id)
    return LikeResponse(liked=result.active, likes_count=result.count)


@router.post("/{pin_id}/save", response_model=SaveResponse)
async def save_pin(
    pin_id: UUID,
    current_user_id: CurrentUserId,
    request: Optional[SavePinRequest] = None,
    relation_service: RelationService = Depends(get_relation_service),
):
    """
    Save the pin, optionally appending it to one of the caller's boards.

    Raises:
        400: Board missing or not writable by the caller
        404: No such pin
        409: Already saved, or already on the board
    """
    board_id = request.board_id if request else None
    result = await relation_service.save_to_board(current_user_id, pin_id, board_id)
    return SaveResponse(
        message="Pin saved to board successfully" if board_id else "Pin saved successfully",
        pin_id=str(result.pin_id),
        board_id=str(result.board_id) if result.board_id else None,
        saved_by_count=result.saved_by_count,
    )


@router.delete("/{pin_id}/save", response_model=SaveResponse)
async def unsave_pin(
    pin_id: UUID,
    current_user_id: CurrentUserId,
    relation_service: RelationService = Depends(get_relation_service),
):
    """
    Remove the pin from the caller's saved pins and from the caller's boards.

    Raises:
        400: The pin was not saved
        404: No such pin
    """
    result = await relation_service.unsave(current_user_id, pin_id)
    return SaveResponse(
        message="Pin removed from saved pins",
        pin_id=str(result.pin_id),
        saved_by_count=result.saved_by_count,
    )
