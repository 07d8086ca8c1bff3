"""Health and status endpoints."""

import os

from fastapi import APIRouter, Request

from vidshare.config import settings
from vidshare.services.storage import SQLiteRepository

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Basic health check - always returns ok if service is running."""
    return {
        "status": "ok",
        "git_sha": os.environ.get("GIT_SHA", "unknown"),
        "build_date": os.environ.get("BUILD_DATE", "unknown"),
        "app_version": settings.app_version,
    }


async def check_database(request: Request) -> str:
    """Check SQLite connectivity."""
    try:
        await SQLiteRepository(request.app.state.db).ping()
        return "ok"
    except Exception as e:
        return f"error: {e}"


@router.get("/ready")
async def ready(request: Request):
    """Readiness check - verifies the database is reachable."""
    checks = {
        "database": await check_database(request),
    }
    all_ok = all(v == "ok" for v in checks.values())
    return {
        "status": "ready" if all_ok else "degraded",
        "checks": checks,
    }
