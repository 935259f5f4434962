"""
Board Handler

Board CRUD endpoints.

    POST   /boards              → Create a board
    GET    /boards/{board_id}   → Read a board (secret: owner only)
    PATCH  /boards/{board_id}   → Partial update (owner only)
    DELETE /boards/{board_id}   → Delete (owner only)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from pinboard.api.dependencies.auth import CurrentUserId
from pinboard.api.dependencies.services import get_board_service
from pinboard.api.handlers.responses import build_board_response
from pinboard.shared.schemas.board import BoardCreate, BoardResponse, BoardUpdate
from pinboard.shared.schemas.common import MessageResponse
from pinboard.shared.services.board_service import BoardService


router = APIRouter()


@router.post(
    "",
    response_model=BoardResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_board(
    request: BoardCreate,
    current_user_id: CurrentUserId,
    board_service: BoardService = Depends(get_board_service),
):
    """
    Create a board owned by the authenticated user.

    Raises:
        400: Invalid data or unknown collaborator
    """
    view = await board_service.create_board(
        current_user_id,
        title=request.title,
        description=request.description,
        category=request.category,
        tags=request.tags,
        collaborators=request.collaborators,
        is_secret=request.is_secret,
    )
    return build_board_response(view)


@router.get("/{board_id}", response_model=BoardResponse)
async def get_board(
    board_id: UUID,
    current_user_id: CurrentUserId,
    board_service: BoardService = Depends(get_board_service),
):
    """
    Raises:
        403: Secret board of another user
        404: No such board
    """
    view = await board_service.get_board(current_user_id, board_id)
    return build_board_response(view)


@router.patch("/{board_id}", response_model=BoardResponse)
async def update_board(
    board_id: UUID,
    request: BoardUpdate,
    current_user_id: CurrentUserId,
    board_service: BoardService = Depends(get_board_service),
):
    """
    Partially update a board. Omitted fields are unchanged.

    Raises:
        403: Not the owner
        404: No such board
    """
    view = await board_service.update_board(
        current_user_id,
        board_id,
        title=request.title,
        description=request.description,
        category=request.category,
        tags=request.tags,
        collaborators=request.collaborators,
        is_secret=request.is_secret,
    )
    return build_board_response(view)


@router.delete("/{board_id}", response_model=MessageResponse)
async def delete_board(
    board_id: UUID,
    current_user_id: CurrentUserId,
    board_service: BoardService = Depends(get_board_service),
):
    """
    Raises:
        403: Not the owner (the board is left untouched)
        404: No such board
    """
    await board_service.delete_board(current_user_id, board_id)
    return MessageResponse(message="Board deleted successfully")
