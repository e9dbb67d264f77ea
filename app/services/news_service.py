"""News feed client: fetches the live-blog payload and flattens it into updates."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

import httpx

from app.classification import should_include
from app.config import Settings
from app.schemas.news import UPDATE_TYPE_PRIORITY, LiveblogResponse, RawUpdate, UpdateType
from app.services.response_cache import ResponseCache

logger = logging.getLogger(__name__)

USER_AGENT = "AidMap/0.1 (news-ingest)"
BACKOFF_BASE_SECONDS = 1.0

NEWS_TIME_LABEL = "أخبار"
TRENDING_TIME_LABEL = "شائع"
NEWS_SOURCE_LABEL = "الجزيرة"


class NewsFetchError(Exception):
    """Raised when the news feed could not be fetched after all retries."""


class NewsService:
    """Fetches and filters news updates from the live-blog JSON endpoint.

    Built explicitly with its config; callers own its lifetime (one per
    process in the web app, one per run in scripts).
    """

    def __init__(
        self,
        api_url: str,
        *,
        cache: ResponseCache | None = None,
        cache_ttl: float = 300.0,
        max_retries: int = 3,
        timeout: float = 15.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.api_url = api_url
        self.cache = cache if cache is not None else ResponseCache()
        self.cache_ttl = cache_ttl
        self.max_retries = max(1, max_retries)
        self.timeout = timeout
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings) -> NewsService:
        return cls(
            settings.news_api_url,
            cache_ttl=settings.news_cache_ttl_seconds,
            max_retries=settings.news_fetch_max_retries,
            timeout=settings.news_fetch_timeout,
        )

    async def fetch_with_retry(self) -> LiveblogResponse:
        """GET the feed, retrying with exponential backoff (1s, 2s, 4s, ...).

        Raises NewsFetchError after ``max_retries`` failed attempts.
        """
        last_error: Exception | None = None
        for attempt in range(self.max_retries):
            try:
                async with httpx.AsyncClient(
                    timeout=self.timeout,
                    follow_redirects=True,
                    headers={"User-Agent": USER_AGENT},
                ) as client:
                    response = await client.get(self.api_url)
                    response.raise_for_status()
                    return LiveblogResponse.model_validate(response.json())
            except (httpx.HTTPError, ValueError) as exc:
                last_error = exc
                if attempt == self.max_retries - 1:
                    break
                delay = BACKOFF_BASE_SECONDS * 2**attempt
                logger.warning(
                    "News fetch attempt %d/%d failed for %s: %s; retrying in %.0fs",
                    attempt + 1,
                    self.max_retries,
                    self.api_url,
                    exc,
                    delay,
                )
                await self._sleep(delay)

        logger.error("News fetch failed after %d attempts for %s: %s", self.max_retries, self.api_url, last_error)
        raise NewsFetchError(f"Failed to fetch news after {self.max_retries} attempts") from last_error

    async def get_feed(self) -> LiveblogResponse:
        """Return the feed, served from cache while younger than ``cache_ttl``."""
        return await self.cache.get_or_fetch(self.api_url, self.cache_ttl, self.fetch_with_retry)

    async def get_latest_updates(self) -> list[RawUpdate]:
        """Flatten, sort and filter the feed into RawUpdates."""
        feed = await self.get_feed()
        updates = sort_updates(flatten_feed(feed))
        filtered = [update for update in updates if should_include(update.content)]
        logger.info("News feed: %d updates, %d after filtering", len(updates), len(filtered))
        return filtered


def flatten_feed(feed: LiveblogResponse) -> list[RawUpdate]:
    """Live-blog entries as-is, then themed news, then trending articles."""
    updates: list[RawUpdate] = list(feed.blogs)
    updates.extend(
        RawUpdate(
            time=NEWS_TIME_LABEL,
            link=item.link,
            content=f"{item.title} - {item.post_excerpt}",
            source=NEWS_SOURCE_LABEL,
            type=UpdateType.news,
            parsed_time=0,
        )
        for item in feed.news
    )
    updates.extend(
        RawUpdate(
            time=TRENDING_TIME_LABEL,
            link=item.link,
            content=item.title,
            source=NEWS_SOURCE_LABEL,
            type=UpdateType.trending,
            parsed_time=0,
        )
        for item in feed.trending
    )
    return updates


def _sort_key(update: RawUpdate) -> tuple[int, int, int, str]:
    priority = UPDATE_TYPE_PRIORITY[update.type or UpdateType.news]
    # parsed_time of 0/None means "unknown"; those sort after timed entries
    has_time = 0 if update.parsed_time else 1
    return priority, has_time, update.parsed_time or 0, update.time


def sort_updates(updates: list[RawUpdate]) -> list[RawUpdate]:
    """Stable sort: type priority, then minutes-ago when known, then time label."""
    return sorted(updates, key=_sort_key)
