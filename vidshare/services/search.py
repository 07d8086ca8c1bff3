"""Unified channel and video search with autocomplete suggestions."""

import asyncio
import logging
from collections.abc import Iterable

from vidshare.models import SearchResults, Suggestion, SuggestionType, VideoModel
from vidshare.services.storage import SQLiteRepository

logger = logging.getLogger(__name__)

SEARCH_CHANNEL_LIMIT = 5
SEARCH_VIDEO_LIMIT = 30
SUGGESTION_VIDEO_LIMIT = 5
SUGGESTION_CHANNEL_LIMIT = 3
SUGGESTION_MIN_LENGTH = 2


def rank_by_channel_match(
    videos: list[VideoModel], matched_owner_ids: Iterable[str]
) -> list[VideoModel]:
    """Move videos owned by matched channels ahead of the rest.

    This is a stable two-way partition: relative order inside each side is
    left exactly as the store returned it.
    """
    owners = set(matched_owner_ids)
    if not owners:
        return list(videos)
    return sorted(videos, key=lambda video: video.user_id not in owners)


class SearchService:
    """Search over the relational store.

    Stateless: every call reads the store afresh and nothing is cached.
    """

    def __init__(self, repo: SQLiteRepository):
        self.repo = repo

    async def search(self, query: str | None) -> SearchResults:
        """Find channels and ready videos containing query.

        Videos from channels that matched the query are listed first; within
        each group videos stay ordered by views descending.

        Args:
            query: Free-text query; blank queries return empty results

        Returns:
            SearchResults with up to 5 channels and 30 videos
        """
        if not query:
            return SearchResults()
        q = query.strip()
        if not q:
            return SearchResults()

        channels, videos = await asyncio.gather(
            self.repo.find_channels(q, limit=SEARCH_CHANNEL_LIMIT),
            self.repo.find_videos(q, limit=SEARCH_VIDEO_LIMIT),
        )

        matched_owner_ids = [channel.owner_id for channel in channels]
        ranked = rank_by_channel_match(videos, matched_owner_ids)

        logger.debug(
            "search q=%r channels=%d videos=%d", q, len(channels), len(ranked)
        )
        return SearchResults(videos=ranked, channels=channels)

    async def get_suggestions(self, query: str | None) -> list[Suggestion]:
        """Autocomplete suggestions: ready video titles, then channel names."""
        if not query or len(query) < SUGGESTION_MIN_LENGTH:
            return []

        titles, channel_names = await asyncio.gather(
            self.repo.find_video_titles(query, limit=SUGGESTION_VIDEO_LIMIT),
            self.repo.find_channel_names(query, limit=SUGGESTION_CHANNEL_LIMIT),
        )

        return [
            *(Suggestion(text=title, type=SuggestionType.VIDEO) for title in titles),
            *(Suggestion(text=name, type=SuggestionType.CHANNEL) for name in channel_names),
        ]
