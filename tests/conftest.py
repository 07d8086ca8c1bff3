"""Shared test fixtures."""

import asyncio
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from vidshare.config import Settings
from vidshare.models import VideoStatus
from vidshare.services.storage import SQLiteRepository, open_database


async def build_catalog(repo: SQLiteRepository) -> dict:
    """Create a small catalog and return the created records by key.

    Tech Visionary owns two ready videos and one still processing.
    Gaming Nexus owns a ready video whose title mentions "Tech" and has more
    views than anything Tech Visionary owns. Science Hub owns the only
    quantum video.
    """
    base = datetime(2026, 1, 1, tzinfo=UTC)

    tech_user = await repo.create_user("tech@example.com", "techvisionary", "Tech Visionary")
    gaming_user = await repo.create_user("gaming@example.com", "gamingnexus", "Gaming Nexus")
    science_user = await repo.create_user("science@example.com", "sciencehub", "Science Hub")
    viewer = await repo.create_user("viewer@example.com", "viewer", "Just Watching")

    tech = await repo.create_channel(
        tech_user.id,
        "Tech Visionary",
        "@techvisionary",
        description="Exploring the bleeding edge of artificial intelligence.",
        verified=True,
    )
    gaming = await repo.create_channel(
        gaming_user.id,
        "Gaming Nexus",
        "@gamingnexus",
        description="Your ultimate source for gaming news and reviews.",
    )
    science = await repo.create_channel(
        science_user.id,
        "Science Hub",
        "@sciencehub",
        description="Physics and maths for everyone.",
    )

    videos = {
        "agents": await repo.create_video(
            tech_user.id,
            "Building the Future of AI Agents",
            description="Cutting-edge developments in agents.",
            views=1_200_000,
            status=VideoStatus.READY,
            category="science",
            created_at=base,
        ),
        "gadgets": await repo.create_video(
            tech_user.id,
            "Gadgets of the Year",
            description="Our favourite hardware.",
            views=300_000,
            status=VideoStatus.READY,
            category="reviews",
            created_at=base + timedelta(days=1),
        ),
        "draft": await repo.create_video(
            tech_user.id,
            "Tech Visionary Draft Upload",
            views=5_000_000,
            status=VideoStatus.PROCESSING,
            created_at=base + timedelta(days=2),
        ),
        "console": await repo.create_video(
            gaming_user.id,
            "Console Tech Specs Compared",
            description="Every number that matters.",
            views=2_000_000,
            status=VideoStatus.READY,
            category="gaming",
            created_at=base + timedelta(days=3),
        ),
        "quantum": await repo.create_video(
            science_user.id,
            "Understanding Quantum Computing",
            description="Quantum computing explained in simple terms.",
            views=900_000,
            status=VideoStatus.READY,
            category="science",
            created_at=base + timedelta(days=4),
        ),
    }

    return {
        "users": {
            "tech": tech_user,
            "gaming": gaming_user,
            "science": science_user,
            "viewer": viewer,
        },
        "channels": {"tech": tech, "gaming": gaming, "science": science},
        "videos": videos,
    }


@pytest_asyncio.fixture
async def repo(tmp_path):
    """Repository over a fresh SQLite file."""
    db = await open_database(str(tmp_path / "vidshare.db"))
    try:
        yield SQLiteRepository(db)
    finally:
        await db.close()


@pytest_asyncio.fixture
async def catalog(repo):
    """Repository populated with build_catalog()."""
    return await build_catalog(repo)


@pytest.fixture
def mock_repo():
    """Mock SQLite repository."""
    repo = MagicMock(spec=SQLiteRepository)
    repo.find_channels = AsyncMock(return_value=[])
    repo.find_videos = AsyncMock(return_value=[])
    repo.find_video_titles = AsyncMock(return_value=[])
    repo.find_channel_names = AsyncMock(return_value=[])
    repo.get_channel = AsyncMock(return_value=None)
    repo.get_channel_by_handle = AsyncMock(return_value=None)
    repo.get_video = AsyncMock(return_value=None)
    repo.list_videos = AsyncMock(return_value=[])
    repo.ping = AsyncMock()
    return repo


@pytest.fixture
def test_settings(tmp_path):
    return Settings(database_path=str(tmp_path / "api.db"), environment="test")


@pytest.fixture
def seeded_catalog(test_settings):
    """Populate the API database file before the app opens it."""

    async def _seed():
        db = await open_database(test_settings.database_path)
        try:
            return await build_catalog(SQLiteRepository(db))
        finally:
            await db.close()

    return asyncio.run(_seed())


@pytest.fixture
def app(monkeypatch, test_settings):
    """FastAPI app pointed at a temporary database."""
    monkeypatch.setattr("vidshare.main.get_settings", lambda: test_settings)
    monkeypatch.setattr("vidshare.errors.get_settings", lambda: test_settings)

    from vidshare.main import app

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """TestClient with the lifespan running; server errors become 500 responses."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(seeded_catalog, app):
    """TestClient over a database already holding build_catalog() data."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
