"""vidshare API - video sharing backend with unified search."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from vidshare.config import get_settings, settings
from vidshare.errors import register_exception_handlers, unhandled_error_handler
from vidshare.routers import channels, health, search, videos
from vidshare.services.storage import open_database

LOG_LEVEL = settings.log_level.upper()

_log_handler = logging.StreamHandler()
_log_handler.setFormatter(
    logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
)
logging.getLogger("vidshare").setLevel(LOG_LEVEL)
logging.getLogger("vidshare").addHandler(_log_handler)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup and close it on shutdown."""
    current = get_settings()
    app.state.db = await open_database(current.database_path)
    logger.info(
        "Database ready at %s (environment=%s)", current.database_path, current.environment
    )
    try:
        yield
    finally:
        await app.state.db.close()
        logger.info("Database connection closed")


app = FastAPI(
    title="vidshare",
    description="Video sharing backend with unified channel and video search",
    version=settings.app_version,
    lifespan=lifespan,
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log one line per request, including ones that end in an unhandled error."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        response = await unhandled_error_handler(request, exc)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %d %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


# Added last so it wraps every response, error envelopes included
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(search.router, prefix="/api")
app.include_router(channels.router, prefix="/api")
app.include_router(videos.router, prefix="/api")
