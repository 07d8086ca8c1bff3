"""Seed the database with demo users, channels and videos.

Clears existing videos, channels and users first.

Usage:
    PYTHONPATH=. uv run python scripts/seed.py
    PYTHONPATH=. uv run python scripts/seed.py --database data/dev.db
"""

import argparse
import asyncio
import random
import sys

from vidshare.models import VideoStatus
from vidshare.services.di import get_storage_context
from vidshare.services.storage import SQLiteRepository

DEMO_STREAM_URL = "https://test-streams.mux.dev/x36xhzz/x36xhzz.m3u8"

DEMO_CHANNELS = [
    {
        "email": "tech@example.com",
        "username": "techvisionary",
        "name": "Tech Visionary",
        "handle": "@techvisionary",
        "description": "Exploring the bleeding edge of technology and artificial intelligence.",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=Tech",
        "banner_url": "https://images.unsplash.com/photo-1519389950473-47ba0277781c",
        "videos": [
            {
                "title": "Building the Future of AI Agents",
                "description": (
                    "Join us as we explore the cutting-edge developments in "
                    "artificial intelligence agents."
                ),
                "thumbnail_url": "https://images.unsplash.com/photo-1620712943543-bcc4688e7485",
                "views": 1_200_000,
                "duration": 860,
            },
            {
                "title": "Understanding Quantum Computing",
                "description": "Quantum computing explained in simple terms.",
                "thumbnail_url": "https://images.unsplash.com/photo-1635070041078-e363dbe005cb",
                "views": 900_000,
                "duration": 605,
            },
        ],
    },
    {
        "email": "gaming@example.com",
        "username": "gamingnexus",
        "name": "Gaming Nexus",
        "handle": "@gamingnexus",
        "description": "Your ultimate source for gaming news, reviews, and deep dives.",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=Gaming",
        "banner_url": "https://images.unsplash.com/photo-1511512578047-dfb367046420",
        "videos": [
            {
                "title": "Cyberpunk 2077: Phantom Liberty Review",
                "description": "Is Phantom Liberty worth your time?",
                "thumbnail_url": "https://images.unsplash.com/photo-1542751371-adc38448a05e",
                "views": 850_000,
                "duration": 1335,
            },
        ],
    },
    {
        "email": "music@example.com",
        "username": "chillhop",
        "name": "Chill Hop",
        "handle": "@chillhop",
        "description": "Relaxing beats to help you study, work, or just chill out.",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=Music",
        "banner_url": "https://images.unsplash.com/photo-1514525253440-b393452e8d26",
        "videos": [],
    },
]

SEEDED_EMAILS = [c["email"] for c in DEMO_CHANNELS]


async def seed_repository(repo: SQLiteRepository) -> dict[str, int]:
    """Replace all catalog data with the demo set. Returns created counts."""
    await repo.delete_all()
    print("Database cleared")

    created = {"users": 0, "channels": 0, "videos": 0}
    for data in DEMO_CHANNELS:
        user = await repo.create_user(
            email=data["email"],
            username=data["username"],
            name=data["name"],
            image=data["avatar_url"],
        )
        await repo.create_channel(
            owner_id=user.id,
            name=data["name"],
            handle=data["handle"],
            description=data["description"],
            avatar_url=data["avatar_url"],
            banner_url=data["banner_url"],
            subscriber_count=random.randint(0, 1_000_000),
            video_count=len(data["videos"]),
            verified=True,
        )
        created["users"] += 1
        created["channels"] += 1
        print(f"Created user and channel for: {data['name']}")

        for video in data["videos"]:
            await repo.create_video(
                user_id=user.id,
                video_url=DEMO_STREAM_URL,
                status=VideoStatus.READY,
                **video,
            )
            created["videos"] += 1

    return created


async def seed(database_path: str | None = None) -> None:
    async with get_storage_context(database_path) as repo:
        created = await seed_repository(repo)
    print(
        f"Seeding completed: {created['users']} users, "
        f"{created['channels']} channels, {created['videos']} videos"
    )


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed the database with demo data")
    parser.add_argument(
        "--database", "-d", default=None,
        help="SQLite database path (default: DATABASE_PATH setting)",
    )
    args = parser.parse_args()

    try:
        asyncio.run(seed(args.database))
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(0)


if __name__ == "__main__":
    main()
