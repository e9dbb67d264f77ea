"""
AidMap FastAPI application entry point.

Pipeline: news feed → classify → upsert AidPoints → retention → map view
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app import __version__
from app.config import get_settings
from app.db.session import check_db_connection, engine
from app.services.news_service import NewsService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Verify the database on startup; release the pool on shutdown."""
    logger.info("AidMap %s starting", __version__)
    try:
        try:
            check_db_connection()
        except Exception as e:
            logger.critical("Database unreachable at startup: %s", e)
            raise
        logger.info("Database reachable")

        if not get_settings().ingest_secret:
            logger.warning("INGEST_SECRET is not set; /ingest-data will reject every request")

        yield
    finally:
        engine.dispose()
        logger.info("AidMap stopped; database pool disposed")


def _health_payload(connected: bool) -> dict:
    return {
        "status": "ok" if connected else "unhealthy",
        "version": __version__,
        "database": "connected" if connected else "disconnected",
    }


def create_app() -> FastAPI:
    """Build the app: routers, per-process NewsService, health check."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # One NewsService (and its response cache) per process
    app.state.news_service = NewsService.from_settings(settings)

    from app.api import aid_points_router, ingest_router, locations_router, news_router

    app.include_router(locations_router, prefix="/api/locations", tags=["locations"])
    app.include_router(aid_points_router, prefix="/api/aid-points", tags=["aid-points"])
    app.include_router(news_router, prefix="/api", tags=["news"])
    # Cron trigger, bearer-secret authenticated
    app.include_router(ingest_router, tags=["ingest"])

    @app.get("/health")
    def health():
        """200 when the database answers, 503 otherwise."""
        try:
            check_db_connection()
        except Exception:
            logger.warning("Health check: database unreachable")
            return JSONResponse(status_code=503, content=_health_payload(False))
        return _health_payload(True)

    return app


app = create_app()
