"""Live-blog scrape endpoint consumed by NewsService."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.schemas.news import LiveblogResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/get-liveblog-news", response_model=LiveblogResponse)
async def get_liveblog_news():
    """Scrape the news site and return ``{headline, blogs, news, trending}``."""
    from app.services.liveblog_scraper import scrape_liveblog

    try:
        return await scrape_liveblog(get_settings().news_site_url)
    except Exception:
        logger.exception("Error scraping live blog")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch news"})
