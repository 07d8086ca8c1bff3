"""Remove seeded demo data.

Deletes all videos and channels, then only the demo users created by
scripts/seed.py. Other user accounts are preserved.

Usage:
    PYTHONPATH=. uv run python scripts/cleanup.py
    PYTHONPATH=. uv run python scripts/cleanup.py --yes
"""

import argparse
import asyncio
import sys

from scripts.seed import SEEDED_EMAILS
from vidshare.services.di import get_storage_context
from vidshare.services.storage import SQLiteRepository


async def cleanup_repository(repo: SQLiteRepository) -> dict[str, int]:
    """Delete catalog rows and seeded users. Returns deleted counts."""
    counts = await repo.delete_catalog()
    print(f"Deleted {counts['videos']} videos")
    print(f"Deleted {counts['channels']} channels")

    counts["users"] = await repo.delete_users_by_email(SEEDED_EMAILS)
    print(f"Deleted {counts['users']} seeded test users")
    return counts


async def cleanup(database_path: str | None = None, skip_confirm: bool = False) -> int:
    if not skip_confirm:
        response = input("Delete all videos, channels and seeded users? (y/N): ")
        if response.lower() not in ["y", "yes"]:
            print("Cleanup cancelled.")
            return 0

    async with get_storage_context(database_path) as repo:
        await cleanup_repository(repo)
    print("Cleanup completed. Real user accounts are preserved.")
    return 0


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Remove seeded demo data")
    parser.add_argument(
        "--database", "-d", default=None,
        help="SQLite database path (default: DATABASE_PATH setting)",
    )
    parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation prompt")
    args = parser.parse_args()

    try:
        sys.exit(asyncio.run(cleanup(args.database, args.yes)))
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(0)


if __name__ == "__main__":
    main()
