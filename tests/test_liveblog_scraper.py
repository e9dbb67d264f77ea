"""Tests for the live-blog scraper (offline HTML fixtures)."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from app.schemas.news import UpdateType
from app.services.liveblog_scraper import (
    parse_liveblog,
    parse_relative_time,
    parse_themed_news,
    parse_trending,
    scrape_liveblog,
)
from tests.test_constants import TEST_NEWS_SITE_URL

HOME_HTML = """
<html><body>
<ul class="liveblog-timeline">
  <li class="liveblog-timeline__update">
    <div class="liveblog-timeline__update-time">5 د</div>
    <a class="liveblog-timeline__update-link" href="/news/liveblog/2026/10/19/gaza?update=3301">
      <h4 class="liveblog-timeline__update-content">عاجل | قصف يستهدف محيط مستشفى الشفاء</h4>
    </a>
    <iframe src="https://www.youtube.com/embed/abc"></iframe>
  </li>
  <li class="liveblog-timeline__update">
    <div class="liveblog-timeline__update-time">2 س</div>
    <a class="liveblog-timeline__update-link" href="https://other.test/post">
      <h4 class="liveblog-timeline__update-content">توزيع مساعدات غذائية في دير البلح</h4>
    </a>
  </li>
  <li class="liveblog-timeline__update">
    <div class="liveblog-timeline__update-time">أمس</div>
    <h4 class="liveblog-timeline__update-content">تحديث بلا رابط</h4>
  </li>
</ul>
<div class="trending-articles">
  <ol class="trending-articles__list">
    <li><a class="article-trending__title-link" href="/news/1"><span>أطفال غزة</span></a></li>
    <li><a class="article-trending__title-link" href="/news/2"><span></span></a></li>
    <li><span>بلا رابط</span></li>
  </ol>
</div>
</body></html>
"""

THEMED_HTML = """
<html><body>
<ul>
  <li class="themed-featured-posts-list__item">
    <a class="u-clickable-card__link" href="/palestine/2026/10/19/story">نزوح جديد</a>
    <p class="article-card__excerpt">عائلات تغادر خان يونس</p>
  </li>
</ul>
</body></html>
"""


class TestParseRelativeTime:
    @pytest.mark.parametrize(
        ("label", "minutes"),
        [("5 د", 5), ("2 س", 120), ("منذ 15 د", 15), ("3س", 180)],
    )
    def test_known_labels(self, label, minutes):
        assert parse_relative_time(label) == minutes

    @pytest.mark.parametrize("label", ["أمس", "", "شائع"])
    def test_unknown_labels(self, label):
        assert parse_relative_time(label) is None


class TestParseLiveblog:
    def test_entries(self):
        updates = parse_liveblog(HOME_HTML, TEST_NEWS_SITE_URL)
        assert len(updates) == 3
        first = updates[0]
        assert first.id == "3301"
        assert first.link == f"{TEST_NEWS_SITE_URL}/news/liveblog/2026/10/19/gaza?update=3301"
        assert first.type == UpdateType.urgent
        assert first.parsed_time == 5
        assert first.has_video is True
        assert first.source == "الجزيرة مباشر"

    def test_absolute_link_kept_and_plain_update(self):
        second = parse_liveblog(HOME_HTML, TEST_NEWS_SITE_URL)[1]
        assert second.link == "https://other.test/post"
        assert second.id is None
        assert second.type == UpdateType.update
        assert second.parsed_time == 120
        assert second.has_video is False

    def test_missing_link(self):
        third = parse_liveblog(HOME_HTML, TEST_NEWS_SITE_URL)[2]
        assert third.link == ""
        assert third.parsed_time is None
        assert third.content == "تحديث بلا رابط"

    def test_empty_page(self):
        assert parse_liveblog("<html></html>", TEST_NEWS_SITE_URL) == []


def test_parse_themed_news():
    [item] = parse_themed_news(THEMED_HTML, TEST_NEWS_SITE_URL)
    assert item.title == "نزوح جديد"
    assert item.link == f"{TEST_NEWS_SITE_URL}/palestine/2026/10/19/story"
    assert item.post_excerpt == "عائلات تغادر خان يونس"


def test_parse_trending_skips_incomplete_entries():
    items = parse_trending(HOME_HTML, TEST_NEWS_SITE_URL)
    assert [(i.title, i.link) for i in items] == [("أطفال غزة", f"{TEST_NEWS_SITE_URL}/news/1")]


class TestScrapeLiveblog:
    async def test_fetches_home_and_themed_pages(self):
        pages = {
            TEST_NEWS_SITE_URL: HOME_HTML,
            f"{TEST_NEWS_SITE_URL}/palestine/": THEMED_HTML,
        }

        async def fake_get(url):
            return httpx.Response(200, text=pages[url], request=httpx.Request("GET", url))

        with patch("app.services.liveblog_scraper.httpx.AsyncClient") as MockClient:
            instance = AsyncMock()
            instance.get.side_effect = fake_get
            instance.__aenter__ = AsyncMock(return_value=instance)
            instance.__aexit__ = AsyncMock(return_value=False)
            MockClient.return_value = instance

            result = await scrape_liveblog(TEST_NEWS_SITE_URL + "/")

        assert len(result.blogs) == 3
        assert len(result.news) == 1
        assert len(result.trending) == 1

    async def test_http_error_propagates(self):
        async def fake_get(url):
            return httpx.Response(502, request=httpx.Request("GET", url))

        with patch("app.services.liveblog_scraper.httpx.AsyncClient") as MockClient:
            instance = AsyncMock()
            instance.get.side_effect = fake_get
            instance.__aenter__ = AsyncMock(return_value=instance)
            instance.__aexit__ = AsyncMock(return_value=False)
            MockClient.return_value = instance

            with pytest.raises(httpx.HTTPStatusError):
                await scrape_liveblog(TEST_NEWS_SITE_URL)
