"""Run a unified search against the local database.

Usage:
    PYTHONPATH=. uv run python scripts/search_videos.py "Tech"
    PYTHONPATH=. uv run python scripts/search_videos.py "quantum" --suggest
"""

import argparse
import asyncio
import sys

from vidshare.services.di import get_storage_context
from vidshare.services.search import SearchService


async def search_videos(query: str, database_path: str | None = None) -> None:
    """Print matching channels and ranked videos."""
    print(f"\n{'=' * 80}")
    print("Unified Search")
    print(f"{'=' * 80}")
    print(f"Query: '{query}'\n")

    async with get_storage_context(database_path) as repo:
        results = await SearchService(repo).search(query)

    print(f"Channels ({len(results.channels)}):")
    for channel in results.channels:
        print(f"  {channel.name} ({channel.handle})")

    print(f"\nVideos ({len(results.videos)}):")
    for i, video in enumerate(results.videos, 1):
        channel = video.user.channel if video.user else None
        channel_name = channel.name if channel else "Unknown"
        print(f"[{i}] {video.title[:60]}")
        print(f"    Channel: {channel_name}  Views: {video.views:,}")
    print()


async def suggest(query: str, database_path: str | None = None) -> None:
    """Print autocomplete suggestions."""
    async with get_storage_context(database_path) as repo:
        suggestions = await SearchService(repo).get_suggestions(query)

    if not suggestions:
        print("No suggestions.")
        return
    for s in suggestions:
        print(f"  [{s.type.value}] {s.text}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Search channels and videos")
    parser.add_argument("query", help="Search query")
    parser.add_argument("--suggest", "-s", action="store_true", help="Show suggestions instead")
    parser.add_argument(
        "--database", "-d", default=None,
        help="SQLite database path (default: DATABASE_PATH setting)",
    )
    args = parser.parse_args()

    try:
        if args.suggest:
            asyncio.run(suggest(args.query, args.database))
        else:
            asyncio.run(search_videos(args.query, args.database))
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(0)


if __name__ == "__main__":
    main()
