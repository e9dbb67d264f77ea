"""Pydantic schemas for request/response validation."""

from app.schemas.aid_point import AidPointCount, AidPointCreate, AidPointRead, AidPointUpdate
from app.schemas.news import (
    Headline,
    LiveblogResponse,
    RawUpdate,
    ThemedNewsItem,
    TrendingItem,
    UpdateType,
)
from app.schemas.relief_location import NewsUpdate, ReliefLocation

__all__ = [
    "AidPointCount",
    "AidPointCreate",
    "AidPointRead",
    "AidPointUpdate",
    "Headline",
    "LiveblogResponse",
    "NewsUpdate",
    "RawUpdate",
    "ReliefLocation",
    "ThemedNewsItem",
    "TrendingItem",
    "UpdateType",
]
