"""Pydantic models for the relational store and API responses."""

from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class VideoStatus(str, Enum):
    """Lifecycle state of an uploaded video."""

    PENDING = "pending"
    PROCESSING = "processing"
    READY = "ready"  # Transcoding finished, eligible for discovery
    FAILED = "failed"


class SuggestionType(str, Enum):
    """Category of an autocomplete suggestion."""

    VIDEO = "video"
    CHANNEL = "channel"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys for the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserModel(CamelModel):
    """A registered user."""

    id: str
    email: str
    username: str
    name: str | None = None
    image: str | None = None
    created_at: datetime | None = None


class ChannelModel(CamelModel):
    """A creator channel, one per owning user."""

    id: str
    owner_id: str
    name: str
    handle: str
    description: str | None = None
    avatar_url: str | None = None
    banner_url: str | None = None
    subscriber_count: int = 0
    video_count: int = 0
    verified: bool = False
    created_at: datetime | None = None


class ChannelOwner(CamelModel):
    """Public projection of a channel's owner."""

    id: str
    username: str
    name: str | None = None
    image: str | None = None


class ChannelWithOwner(ChannelModel):
    """Channel with its owner attached."""

    owner: ChannelOwner


class UserWithChannel(UserModel):
    """User with their channel attached, if they have one."""

    channel: ChannelModel | None = None


class VideoModel(CamelModel):
    """A video row, optionally with its owning user and channel."""

    id: str
    user_id: str
    title: str
    description: str | None = None
    thumbnail_url: str | None = None
    video_url: str | None = None
    duration: int | None = None
    views: int = 0
    status: VideoStatus = VideoStatus.PENDING
    category: str | None = None
    created_at: datetime | None = None
    user: UserWithChannel | None = None


class SearchResults(CamelModel):
    """Unified search results."""

    videos: list[VideoModel] = Field(default_factory=list)
    channels: list[ChannelModel] = Field(default_factory=list)


class Suggestion(CamelModel):
    """Autocomplete suggestion."""

    text: str
    type: SuggestionType


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope shared by all JSON endpoints."""

    success: bool = True
    data: T
