"""
Comment Handler

Comments and replies, nested under their pin.

    POST   /pins/{pin_id}/comments                        → Top-level comment
    GET    /pins/{pin_id}/comments/{comment_id}           → Read a comment
    PATCH  /pins/{pin_id}/comments/{comment_id}           → Edit (author only)
    DELETE /pins/{pin_id}/comments/{comment_id}           → Delete with replies
    POST   /pins/{pin_id}/comments/{comment_id}/replies   → Reply
    POST   /pins/{pin_id}/comments/{comment_id}/like      → Like / unlike toggle
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from pinboard.api.dependencies.auth import CurrentUserId
from pinboard.api.dependencies.services import (
    get_comment_service,
    get_engagement_service,
    get_relation_service,
)
from pinboard.api.handlers.responses import build_comment_response, build_new_comment_response
from pinboard.shared.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from pinboard.shared.schemas.common import MessageResponse
from pinboard.shared.schemas.pin import LikeResponse
from pinboard.shared.services.comment_service import CommentService
from pinboard.shared.services.engagement_service import EngagementService
from pinboard.shared.services.relation_service import RelationService


router = APIRouter()


@router.post(
    "/{pin_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    pin_id: UUID,
    request: CommentCreate,
    current_user_id: CurrentUserId,
    relation_service: RelationService = Depends(get_relation_service),
):
    """
    Add a top-level comment to the pin.

    Raises:
        404: No such pin
    """
    comment = await relation_service.add_comment(
        current_user_id,
        pin_id,
        text=request.text,
        image=request.image,
    )
    return build_new_comment_response(comment)


@router.get("/{pin_id}/comments/{comment_id}", response_model=CommentResponse)
async def get_comment(
    pin_id: UUID,
    comment_id: UUID,
    current_user_id: CurrentUserId,
    comment_service: CommentService = Depends(get_comment_service),
):
    view = await comment_service.get_comment(current_user_id, pin_id, comment_id)
    return build_comment_response(view)


@router.patch("/{pin_id}/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    pin_id: UUID,
    comment_id: UUID,
    request: CommentUpdate,
    current_user_id: CurrentUserId,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Raises:
        403: Not the author
        404: No such comment on this pin
    """
    view = await comment_service.update_comment(
        current_user_id,
        pin_id,
        comment_id,
        text=request.text,
        image=request.image,
    )
    return build_comment_response(view)


@router.delete("/{pin_id}/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    pin_id: UUID,
    comment_id: UUID,
    current_user_id: CurrentUserId,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Delete the comment and every reply below it.

    Raises:
        403: Not the author
        404: No such comment on this pin
    """
    await comment_service.delete_comment(current_user_id, pin_id, comment_id)
    return MessageResponse(message="Comment deleted successfully")


@router.post(
    "/{pin_id}/comments/{comment_id}/replies",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    pin_id: UUID,
    comment_id: UUID,
    request: CommentCreate,
    current_user_id: CurrentUserId,
    relation_service: RelationService = Depends(get_relation_service),
):
    """
    Reply to a comment. The reply is listed under its parent only.

    Raises:
        400: The comment belongs to another pin
        404: No such pin or comment
    """
    reply = await relation_service.add_reply(
        current_user_id,
        pin_id,
        comment_id,
        text=request.text,
        image=request.image,
    )
    return build_new_comment_response(reply)


@router.post("/{pin_id}/comments/{comment_id}/like", response_model=LikeResponse)
async def like_comment(
    pin_id: UUID,
    comment_id: UUID,
    current_user_id: CurrentUserId,
    engagement_service: EngagementService = Depends(get_engagement_service),
):
    """
    Like the comment, or unlike it if already liked.

    Raises:
        404: No such comment on this pin
    """
    result = await engagement_service.like_comment(current_user_id, comment_id, pin_id=pin_id)
    return LikeResponse(liked=result.active, likes_count=result.count)
