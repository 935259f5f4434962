"""
User Handler

Account, profile and follow endpoints.

    GET    /users/me                  → The caller, with all boards
    PATCH  /users/me                  → Update the caller's profile
    DELETE /users/me                  → Delete the caller's account
    GET    /users/{username}          → Public profile
    POST   /users/{user_id}/follow    → Follow / unfollow toggle
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from pinboard.api.dependencies.auth import CurrentUserId
from pinboard.api.dependencies.services import get_relation_service, get_user_service
from pinboard.api.handlers.responses import build_user_detail_response
from pinboard.shared.schemas.common import MessageResponse
from pinboard.shared.schemas.user import FollowResponse, UserDetailResponse, UserUpdate
from pinboard.shared.services.relation_service import RelationService
from pinboard.shared.services.user_service import UserService


router = APIRouter()


@router.get("/me", response_model=UserDetailResponse)
async def get_current_user(
    current_user_id: CurrentUserId,
    user_service: UserService = Depends(get_user_service),
):
    """The authenticated user, secret boards included."""
    view = await user_service.get_current(current_user_id)
    return build_user_detail_response(view)


@router.patch("/me", response_model=UserDetailResponse)
async def update_current_user(
    request: UserUpdate,
    current_user_id: CurrentUserId,
    user_service: UserService = Depends(get_user_service),
):
    """
    Update the authenticated user's profile.

    Raises:
        400: Invalid value, or username already taken
    """
    view = await user_service.update_profile(
        current_user_id,
        first_name=request.first_name,
        surname=request.surname,
        username=request.username,
        bio=request.bio,
        profile_image=request.profile_image,
    )
    return build_user_detail_response(view)


@router.delete("/me", response_model=MessageResponse)
async def delete_current_user(
    current_user_id: CurrentUserId,
    user_service: UserService = Depends(get_user_service),
):
    """Delete the authenticated user together with their pins, boards and comments."""
    await user_service.delete_account(current_user_id)
    return MessageResponse(message="Account deleted successfully")


@router.get("/{username}", response_model=UserDetailResponse)
async def get_profile(
    username: str,
    current_user_id: CurrentUserId,
    user_service: UserService = Depends(get_user_service),
):
    """
    A user's profile. Only public boards are listed.

    Raises:
        404: No such user
    """
    view = await user_service.get_profile(current_user_id, username)
    return build_user_detail_response(view)


@router.post("/{user_id}/follow", response_model=FollowResponse)
async def follow_user(
    user_id: UUID,
    current_user_id: CurrentUserId,
    relation_service: RelationService = Depends(get_relation_service),
):
    """
    Follow the user, or unfollow if already following.

    Raises:
        400: Following yourself
        404: No such user
    """
    result = await relation_service.follow_toggle(current_user_id, user_id)
    return FollowResponse(
        message=result.message,
        following=result.following,
        following_count=result.following_count,
        followers_count=result.followers_count,
    )
