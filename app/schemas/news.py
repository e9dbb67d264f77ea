"""News feed schemas: scraped live-blog payload and flattened raw updates.

Wire format uses the camelCase keys of the live-blog JSON API
(``parsedTime``, ``hasVideo``, ``postExcerpt``); Python attributes are
snake_case and both spellings are accepted on input.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UpdateType(str, Enum):
    """Feed section an update came from; also its sort priority."""

    urgent = "urgent"
    update = "update"
    news = "news"
    trending = "trending"


UPDATE_TYPE_PRIORITY: dict[UpdateType, int] = {
    UpdateType.urgent: 0,
    UpdateType.update: 1,
    UpdateType.news: 2,
    UpdateType.trending: 3,
}


class RawUpdate(BaseModel):
    """One news update as consumed by the ingestion pipeline.

    Immutable; lives only for the duration of one ingestion cycle.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    time: str = ""
    link: str = ""
    content: str = ""
    id: Optional[str] = None
    source: Optional[str] = None
    type: Optional[UpdateType] = None
    parsed_time: Optional[int] = Field(None, alias="parsedTime")
    has_video: bool = Field(False, alias="hasVideo")


class Headline(BaseModel):
    title: str = ""
    link: str = ""


class ThemedNewsItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    link: str = ""
    post_excerpt: str = Field("", alias="postExcerpt")


class TrendingItem(BaseModel):
    title: str = ""
    link: str = ""


class LiveblogResponse(BaseModel):
    """Payload of ``GET /api/get-liveblog-news``."""

    model_config = ConfigDict(populate_by_name=True)

    headline: Headline = Field(default_factory=Headline)
    blogs: list[RawUpdate] = Field(default_factory=list)
    news: list[ThemedNewsItem] = Field(default_factory=list)
    trending: list[TrendingItem] = Field(default_factory=list)
