"""Scrape the news site's live blog, themed section and trending list.

Uses httpx for fetching and BeautifulSoup4 for parsing. The parse
functions are pure and take HTML strings so they can be tested offline.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from app.schemas.news import LiveblogResponse, RawUpdate, ThemedNewsItem, TrendingItem, UpdateType

logger = logging.getLogger(__name__)

USER_AGENT = "AidMap/0.1 (news-ingest)"
TIMEOUT = 15.0
MAX_REDIRECTS = 3

THEMED_SECTION_PATH = "/palestine/"
LIVE_SOURCE_LABEL = "الجزيرة مباشر"
URGENT_MARKER = "عاجل"

_UPDATE_ID_RE = re.compile(r"update=(\d+)")
# "5 د" = 5 minutes ago, "2 س" = 2 hours ago
_RELATIVE_TIME_RE = re.compile(r"(\d+)\s*(د|س)")


def parse_relative_time(label: str) -> int | None:
    """Convert a relative time label to minutes ago, or None if unrecognised."""
    match = _RELATIVE_TIME_RE.search(label)
    if not match:
        return None
    value = int(match.group(1))
    return value if match.group(2) == "د" else value * 60


def _text(node) -> str:
    return node.get_text(strip=True) if node is not None else ""


def parse_liveblog(html: str, base_url: str) -> list[RawUpdate]:
    """Extract live-blog timeline entries."""
    soup = BeautifulSoup(html, "html.parser")
    updates: list[RawUpdate] = []
    for item in soup.select("li.liveblog-timeline__update"):
        time_label = _text(item.select_one("div.liveblog-timeline__update-time"))
        anchor = item.select_one("a.liveblog-timeline__update-link")
        href = anchor.get("href") if anchor is not None else None
        content = _text(item.select_one("h4.liveblog-timeline__update-content"))
        link = urljoin(base_url + "/", href) if href else ""
        id_match = _UPDATE_ID_RE.search(link)
        has_video = bool(item.select('iframe[src*="youtube"], video'))
        updates.append(
            RawUpdate(
                id=id_match.group(1) if id_match else None,
                time=time_label,
                parsed_time=parse_relative_time(time_label),
                link=link,
                content=content,
                source=LIVE_SOURCE_LABEL,
                type=UpdateType.urgent if URGENT_MARKER in content else UpdateType.update,
                has_video=has_video,
            )
        )
    return updates


def parse_themed_news(html: str, base_url: str) -> list[ThemedNewsItem]:
    """Extract featured posts from the themed section page."""
    soup = BeautifulSoup(html, "html.parser")
    items: list[ThemedNewsItem] = []
    for item in soup.select("li.themed-featured-posts-list__item"):
        anchor = item.select_one("a.u-clickable-card__link")
        href = anchor.get("href") if anchor is not None else None
        items.append(
            ThemedNewsItem(
                title=_text(anchor),
                link=urljoin(base_url + "/", href) if href else "",
                post_excerpt=_text(item.select_one("p.article-card__excerpt")),
            )
        )
    return items


def parse_trending(html: str, base_url: str) -> list[TrendingItem]:
    """Extract trending articles; entries without a title or link are skipped."""
    soup = BeautifulSoup(html, "html.parser")
    items: list[TrendingItem] = []
    for item in soup.select("div.trending-articles ol.trending-articles__list li"):
        anchor = item.select_one("a.article-trending__title-link")
        href = anchor.get("href") if anchor is not None else None
        title = _text(item.select_one("a.article-trending__title-link span"))
        if href and title:
            items.append(TrendingItem(title=title, link=urljoin(base_url + "/", href)))
    return items


async def _get_html(client: httpx.AsyncClient, url: str) -> str:
    response = await client.get(url)
    response.raise_for_status()
    return response.text


async def scrape_liveblog(site_url: str) -> LiveblogResponse:
    """Fetch and parse the home page (live blog + trending) and themed section.

    HTTP errors propagate; the caller decides how to surface them.
    """
    base_url = site_url.rstrip("/")
    async with httpx.AsyncClient(
        timeout=TIMEOUT,
        follow_redirects=True,
        max_redirects=MAX_REDIRECTS,
        headers={"User-Agent": USER_AGENT},
    ) as client:
        logger.info("Scraping live blog updates from %s", base_url)
        live_html = await _get_html(client, base_url)
        logger.info("Scraping themed news from %s%s", base_url, THEMED_SECTION_PATH)
        themed_html = await _get_html(client, base_url + THEMED_SECTION_PATH)

    return LiveblogResponse(
        blogs=parse_liveblog(live_html, base_url),
        news=parse_themed_news(themed_html, base_url),
        trending=parse_trending(live_html, base_url),
    )
