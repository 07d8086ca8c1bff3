"""Channel lookup endpoints."""

from fastapi import APIRouter, Depends

from vidshare.errors import NotFoundError
from vidshare.models import ApiResponse, ChannelWithOwner
from vidshare.services.di import get_repository
from vidshare.services.storage import SQLiteRepository

router = APIRouter(prefix="/channels", tags=["channels"])


@router.get("/handle/{handle}", response_model=ApiResponse[ChannelWithOwner])
async def get_channel_by_handle(
    handle: str,
    repo: SQLiteRepository = Depends(get_repository),
):
    """Get a channel by its public handle (e.g. @techvisionary)."""
    channel = await repo.get_channel_by_handle(handle)
    if not channel:
        raise NotFoundError("Channel not found")
    return ApiResponse[ChannelWithOwner](data=channel)


@router.get("/{channel_id}", response_model=ApiResponse[ChannelWithOwner])
async def get_channel(
    channel_id: str,
    repo: SQLiteRepository = Depends(get_repository),
):
    """Get a channel by ID."""
    channel = await repo.get_channel(channel_id)
    if not channel:
        raise NotFoundError("Channel not found")
    return ApiResponse[ChannelWithOwner](data=channel)
