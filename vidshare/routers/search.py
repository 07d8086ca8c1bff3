"""Search endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from vidshare.models import ApiResponse, SearchResults, Suggestion
from vidshare.services.di import get_search_service
from vidshare.services.search import SearchService

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/suggestions", response_model=ApiResponse[list[Suggestion]])
async def search_suggestions(
    q: Annotated[str | None, Query(description="Partial query to complete")] = None,
    search_service: SearchService = Depends(get_search_service),
):
    """Autocomplete suggestions from ready video titles and channel names."""
    suggestions = await search_service.get_suggestions(q)
    return ApiResponse[list[Suggestion]](data=suggestions)


@router.get("", response_model=ApiResponse[SearchResults])
async def search(
    q: Annotated[str | None, Query(description="Search query")] = None,
    search_service: SearchService = Depends(get_search_service),
):
    """Unified search across channels and ready videos.

    Videos owned by a matching channel are listed first.
    """
    if not q:
        return ApiResponse[SearchResults](data=SearchResults())

    results = await search_service.search(q)
    return ApiResponse[SearchResults](data=results)
