"""API routes."""

from app.api.aid_points import router as aid_points_router
from app.api.ingest import router as ingest_router
from app.api.locations import router as locations_router
from app.api.news import router as news_router

__all__ = ["aid_points_router", "ingest_router", "locations_router", "news_router"]
