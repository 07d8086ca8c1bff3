"""Dependency injection for the store and services."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, Request

from vidshare.config import settings
from vidshare.services.search import SearchService
from vidshare.services.storage import SQLiteRepository, open_database


@asynccontextmanager
async def get_storage_context(
    database_path: str | None = None,
) -> AsyncGenerator[SQLiteRepository, None]:
    """Open the store for scripts that run outside the web app.

    Yields:
        SQLiteRepository bound to a fresh connection, closed on exit
    """
    db = await open_database(database_path or settings.database_path)
    try:
        yield SQLiteRepository(db)
    finally:
        await db.close()


def get_repository(request: Request) -> SQLiteRepository:
    """Get repository over the connection opened by the app lifespan."""
    return SQLiteRepository(request.app.state.db)


def get_search_service(
    repo: SQLiteRepository = Depends(get_repository),
) -> SearchService:
    """Get SearchService instance for dependency injection."""
    return SearchService(repo)
