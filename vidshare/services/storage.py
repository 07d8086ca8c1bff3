"""SQLite storage for users, channels and videos."""

import logging
import sqlite3
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import aiosqlite

from vidshare.errors import ConflictError
from vidshare.models import (
    ChannelModel,
    ChannelOwner,
    ChannelWithOwner,
    UserModel,
    UserWithChannel,
    VideoModel,
    VideoStatus,
)
from vidshare.services.sql_like import contains_any

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    email TEXT NOT NULL UNIQUE,
    username TEXT NOT NULL UNIQUE,
    name TEXT,
    image TEXT,
    created_at TEXT NOT NULL
);

-- One channel per owning user
CREATE TABLE IF NOT EXISTS channels (
    id TEXT PRIMARY KEY,
    owner_id TEXT NOT NULL UNIQUE REFERENCES users(id) ON DELETE CASCADE,
    name TEXT NOT NULL,
    handle TEXT NOT NULL UNIQUE,
    description TEXT,
    avatar_url TEXT,
    banner_url TEXT,
    subscriber_count INTEGER NOT NULL DEFAULT 0,
    video_count INTEGER NOT NULL DEFAULT 0,
    verified INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS videos (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    title TEXT NOT NULL,
    description TEXT,
    thumbnail_url TEXT,
    video_url TEXT,
    duration INTEGER,
    views INTEGER NOT NULL DEFAULT 0,
    status TEXT NOT NULL DEFAULT 'pending'
        CHECK (status IN ('pending', 'processing', 'ready', 'failed')),
    category TEXT,
    created_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_videos_user_id ON videos(user_id);
CREATE INDEX IF NOT EXISTS idx_videos_status_views ON videos(status, views DESC);
"""

USER_COLUMNS = ("id", "email", "username", "name", "image", "created_at")
CHANNEL_COLUMNS = (
    "id",
    "owner_id",
    "name",
    "handle",
    "description",
    "avatar_url",
    "banner_url",
    "subscriber_count",
    "video_count",
    "verified",
    "created_at",
)
VIDEO_COLUMNS = (
    "id",
    "user_id",
    "title",
    "description",
    "thumbnail_url",
    "video_url",
    "duration",
    "views",
    "status",
    "category",
    "created_at",
)


def _casefold(value: Any) -> Any:
    return value.casefold() if isinstance(value, str) else value


async def open_database(database_path: str) -> aiosqlite.Connection:
    """Open a connection, register SQL helpers, and apply the schema."""
    if database_path != ":memory:":
        Path(database_path).parent.mkdir(parents=True, exist_ok=True)

    db = await aiosqlite.connect(database_path)
    db.row_factory = aiosqlite.Row
    await db.execute("PRAGMA foreign_keys = ON")
    await db.create_function("casefold", 1, _casefold, deterministic=True)
    await db.executescript(SCHEMA)
    await db.commit()
    return db


def _select_list(alias: str, columns: tuple[str, ...]) -> str:
    return ", ".join(f"{alias}.{col} AS {alias}__{col}" for col in columns)


def _pluck(row: aiosqlite.Row, alias: str, columns: tuple[str, ...]) -> dict[str, Any]:
    return {col: row[f"{alias}__{col}"] for col in columns}


def _now() -> str:
    return datetime.now(UTC).isoformat()


_VIDEO_SELECT = f"""
    SELECT {_select_list("v", VIDEO_COLUMNS)},
           {_select_list("u", USER_COLUMNS)},
           {_select_list("c", CHANNEL_COLUMNS)}
    FROM videos v
    JOIN users u ON u.id = v.user_id
    LEFT JOIN channels c ON c.owner_id = u.id
"""

_CHANNEL_WITH_OWNER_SELECT = f"""
    SELECT {_select_list("c", CHANNEL_COLUMNS)},
           {_select_list("u", USER_COLUMNS)}
    FROM channels c
    JOIN users u ON u.id = c.owner_id
"""


class SQLiteRepository:
    """aiosqlite connection wrapper for catalog reads and seeding writes."""

    def __init__(self, db: aiosqlite.Connection):
        """Initialize repository.

        Args:
            db: Open connection from open_database()
        """
        self.db = db

    async def _fetchall(self, sql: str, params: list | tuple = ()) -> list[aiosqlite.Row]:
        async with self.db.execute(sql, params) as cursor:
            return list(await cursor.fetchall())

    async def _fetchone(self, sql: str, params: list | tuple = ()) -> aiosqlite.Row | None:
        async with self.db.execute(sql, params) as cursor:
            return await cursor.fetchone()

    def _parse_video(self, row: aiosqlite.Row) -> VideoModel:
        video = _pluck(row, "v", VIDEO_COLUMNS)
        user = _pluck(row, "u", USER_COLUMNS)
        channel = None
        if row["c__id"] is not None:
            channel = ChannelModel(**_pluck(row, "c", CHANNEL_COLUMNS))
        return VideoModel(**video, user=UserWithChannel(**user, channel=channel))

    def _parse_channel_with_owner(self, row: aiosqlite.Row) -> ChannelWithOwner:
        owner = _pluck(row, "u", USER_COLUMNS)
        return ChannelWithOwner(
            **_pluck(row, "c", CHANNEL_COLUMNS),
            owner=ChannelOwner(
                id=owner["id"],
                username=owner["username"],
                name=owner["name"],
                image=owner["image"],
            ),
        )

    async def ping(self) -> None:
        """Run a trivial query to prove the connection works."""
        await self._fetchone("SELECT 1")

    # ---- search lookups ----

    async def find_channels(self, query: str, limit: int) -> list[ChannelModel]:
        """Channels whose name, handle or description contains query."""
        predicate, params = contains_any(["name", "handle", "description"], query)
        rows = await self._fetchall(
            f"SELECT {', '.join(CHANNEL_COLUMNS)} FROM channels WHERE {predicate} LIMIT ?",
            [*params, limit],
        )
        return [ChannelModel(**dict(row)) for row in rows]

    async def find_videos(self, query: str, limit: int) -> list[VideoModel]:
        """Ready videos matching query on their own text or their channel's name/handle.

        Ordered by views descending.
        """
        predicate, params = contains_any(
            ["v.title", "v.description", "c.name", "c.handle"], query
        )
        rows = await self._fetchall(
            f"""
            {_VIDEO_SELECT}
            WHERE v.status = ? AND {predicate}
            ORDER BY v.views DESC, v.rowid ASC
            LIMIT ?
            """,
            [VideoStatus.READY.value, *params, limit],
        )
        return [self._parse_video(row) for row in rows]

    async def find_video_titles(self, query: str, limit: int) -> list[str]:
        """Titles of ready videos containing query."""
        predicate, params = contains_any(["title"], query)
        rows = await self._fetchall(
            f"SELECT title FROM videos WHERE status = ? AND {predicate} LIMIT ?",
            [VideoStatus.READY.value, *params, limit],
        )
        return [row["title"] for row in rows]

    async def find_channel_names(self, query: str, limit: int) -> list[str]:
        """Channel names containing query."""
        predicate, params = contains_any(["name"], query)
        rows = await self._fetchall(
            f"SELECT name FROM channels WHERE {predicate} LIMIT ?",
            [*params, limit],
        )
        return [row["name"] for row in rows]

    # ---- catalog reads ----

    async def get_channel(self, channel_id: str) -> ChannelWithOwner | None:
        row = await self._fetchone(f"{_CHANNEL_WITH_OWNER_SELECT} WHERE c.id = ?", (channel_id,))
        return self._parse_channel_with_owner(row) if row else None

    async def get_channel_by_handle(self, handle: str) -> ChannelWithOwner | None:
        row = await self._fetchone(f"{_CHANNEL_WITH_OWNER_SELECT} WHERE c.handle = ?", (handle,))
        return self._parse_channel_with_owner(row) if row else None

    async def get_video(self, video_id: str) -> VideoModel | None:
        row = await self._fetchone(f"{_VIDEO_SELECT} WHERE v.id = ?", (video_id,))
        return self._parse_video(row) if row else None

    async def list_videos(
        self,
        limit: int = 20,
        offset: int = 0,
        category: str | None = None,
        channel_id: str | None = None,
    ) -> list[VideoModel]:
        """List videos newest first.

        Only ready videos are listed unless channel_id is given, in which case
        the channel's pending and processing uploads are included too.
        """
        conditions: list[str] = []
        params: list[Any] = []

        if category and category != "all":
            conditions.append("v.category = ?")
            params.append(category)

        if channel_id:
            conditions.append("c.id = ?")
            params.append(channel_id)
        else:
            conditions.append("v.status = ?")
            params.append(VideoStatus.READY.value)

        where_clause = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        rows = await self._fetchall(
            f"{_VIDEO_SELECT} {where_clause} ORDER BY v.created_at DESC LIMIT ? OFFSET ?",
            [*params, limit, offset],
        )
        return [self._parse_video(row) for row in rows]

    # ---- writes (seeding and tests) ----

    async def create_user(
        self,
        email: str,
        username: str,
        name: str | None = None,
        image: str | None = None,
    ) -> UserModel:
        user = UserModel(
            id=str(uuid.uuid4()),
            email=email,
            username=username,
            name=name,
            image=image,
            created_at=_now(),
        )
        await self.db.execute(
            f"INSERT INTO users ({', '.join(USER_COLUMNS)}) VALUES (?, ?, ?, ?, ?, ?)",
            (
                user.id,
                user.email,
                user.username,
                user.name,
                user.image,
                user.created_at.isoformat(),
            ),
        )
        await self.db.commit()
        return user

    async def create_channel(
        self,
        owner_id: str,
        name: str,
        handle: str,
        description: str | None = None,
        avatar_url: str | None = None,
        banner_url: str | None = None,
        subscriber_count: int = 0,
        video_count: int = 0,
        verified: bool = False,
    ) -> ChannelModel:
        """Create a channel for owner_id.

        Raises:
            ConflictError: If the owner already has a channel or the handle is taken
        """
        channel = ChannelModel(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            name=name,
            handle=handle,
            description=description,
            avatar_url=avatar_url,
            banner_url=banner_url,
            subscriber_count=subscriber_count,
            video_count=video_count,
            verified=verified,
            created_at=_now(),
        )
        values = channel.model_dump()
        values["verified"] = int(channel.verified)
        values["created_at"] = channel.created_at.isoformat()
        try:
            await self.db.execute(
                f"INSERT INTO channels ({', '.join(CHANNEL_COLUMNS)}) "
                f"VALUES ({', '.join('?' * len(CHANNEL_COLUMNS))})",
                tuple(values[col] for col in CHANNEL_COLUMNS),
            )
        except sqlite3.IntegrityError as e:
            await self.db.rollback()
            if "channels.owner_id" in str(e):
                raise ConflictError("You already have a channel") from e
            if "channels.handle" in str(e):
                raise ConflictError("This handle is already taken") from e
            raise
        await self.db.commit()
        return channel

    async def create_video(
        self,
        user_id: str,
        title: str,
        description: str | None = None,
        thumbnail_url: str | None = None,
        video_url: str | None = None,
        duration: int | None = None,
        views: int = 0,
        status: VideoStatus = VideoStatus.PENDING,
        category: str | None = None,
        created_at: datetime | None = None,
    ) -> VideoModel:
        video = VideoModel(
            id=str(uuid.uuid4()),
            user_id=user_id,
            title=title,
            description=description,
            thumbnail_url=thumbnail_url,
            video_url=video_url,
            duration=duration,
            views=views,
            status=status,
            category=category,
            created_at=created_at or datetime.now(UTC),
        )
        values = video.model_dump(exclude={"user"})
        values["status"] = video.status.value
        values["created_at"] = video.created_at.isoformat()
        await self.db.execute(
            f"INSERT INTO videos ({', '.join(VIDEO_COLUMNS)}) "
            f"VALUES ({', '.join('?' * len(VIDEO_COLUMNS))})",
            tuple(values[col] for col in VIDEO_COLUMNS),
        )
        await self.db.commit()
        return video

    async def delete_all(self) -> dict[str, int]:
        """Delete every video, channel and user. Returns deleted row counts."""
        counts = {}
        for table in ("videos", "channels", "users"):
            cursor = await self.db.execute(f"DELETE FROM {table}")
            counts[table] = cursor.rowcount
            await cursor.close()
        await self.db.commit()
        return counts

    async def delete_catalog(self) -> dict[str, int]:
        """Delete every video and channel, keeping users."""
        counts = {}
        for table in ("videos", "channels"):
            cursor = await self.db.execute(f"DELETE FROM {table}")
            counts[table] = cursor.rowcount
            await cursor.close()
        await self.db.commit()
        return counts

    async def delete_users_by_email(self, emails: list[str]) -> int:
        if not emails:
            return 0
        placeholders = ", ".join("?" * len(emails))
        cursor = await self.db.execute(
            f"DELETE FROM users WHERE email IN ({placeholders})", tuple(emails)
        )
        deleted = cursor.rowcount
        await cursor.close()
        await self.db.commit()
        return deleted
