from typing import List

from fastapi import APIRouter, Depends, status

from langbridge.api.friends.models import (
    FriendRequestOut,
    FriendRequests,
    Message,
    OutgoingFriendRequest,
    UserSummary,
)
from langbridge.api.friends.service import FriendshipService
from langbridge.core.dependencies import get_current_active_user, get_friendship_service

router = APIRouter()


@router.get("/", response_model=List[UserSummary])
async def get_recommended_users(
    user_id: str = Depends(get_current_active_user),
    service: FriendshipService = Depends(get_friendship_service),
):
    return await service.get_recommended_users(user_id)


@router.get("/friends", response_model=List[UserSummary])
async def get_my_friends(
    user_id: str = Depends(get_current_active_user),
    service: FriendshipService = Depends(get_friendship_service),
):
    return await service.get_my_friends(user_id)


@router.post(
    "/friend-request/{recipient_id}",
    response_model=FriendRequestOut,
    status_code=status.HTTP_201_CREATED,
)
async def send_friend_request(
    recipient_id: str,
    user_id: str = Depends(get_current_active_user),
    service: FriendshipService = Depends(get_friendship_service),
):
    return await service.send_friend_request(user_id, recipient_id)


@router.put("/friend-request/{request_id}/accept", response_model=Message)
async def accept_friend_request(
    request_id: str,
    user_id: str = Depends(get_current_active_user),
    service: FriendshipService = Depends(get_friendship_service),
):
    return await service.accept_friend_request(user_id, request_id)


@router.get("/friend-requests", response_model=FriendRequests)
async def get_friend_requests(
    user_id: str = Depends(get_current_active_user),
    service: FriendshipService = Depends(get_friendship_service),
):
    return await service.get_friend_requests(user_id)


@router.get("/outgoing-friend-requests", response_model=List[OutgoingFriendRequest])
async def get_outgoing_friend_requests(
    user_id: str = Depends(get_current_active_user),
    service: FriendshipService = Depends(get_friendship_service),
):
    return await service.get_outgoing_friend_requests(user_id)
