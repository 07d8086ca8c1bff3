"""Video read endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from vidshare.errors import NotFoundError
from vidshare.models import ApiResponse, VideoModel
from vidshare.services.di import get_repository
from vidshare.services.storage import SQLiteRepository

router = APIRouter(prefix="/videos", tags=["videos"])


@router.get("", response_model=ApiResponse[list[VideoModel]])
async def list_videos(
    category: Annotated[str | None, Query(description="Category, or 'all'")] = None,
    channel_id: Annotated[
        str | None, Query(alias="channelId", description="Only videos of this channel")
    ] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    offset: Annotated[int, Query(ge=0)] = 0,
    repo: SQLiteRepository = Depends(get_repository),
):
    """List videos newest first.

    Without channelId only ready videos are returned.
    """
    videos = await repo.list_videos(
        limit=limit, offset=offset, category=category, channel_id=channel_id
    )
    return ApiResponse[list[VideoModel]](data=videos)


@router.get("/{video_id}", response_model=ApiResponse[VideoModel])
async def get_video(
    video_id: str,
    repo: SQLiteRepository = Depends(get_repository),
):
    """Get a video with its owner and channel."""
    video = await repo.get_video(video_id)
    if not video:
        raise NotFoundError("Video not found")
    return ApiResponse[VideoModel](data=video)
