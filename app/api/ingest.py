"""Ingestion trigger endpoint for cron/scripts.

Secured with a shared secret (``Authorization: Bearer <INGEST_SECRET>``),
not user auth. Meant for automated triggers only.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_news_service, is_authorized
from app.services.news_service import NewsService

logger = logging.getLogger(__name__)

router = APIRouter(include_in_schema=False)


@router.post("/ingest-data")
async def ingest_data(
    db: Session = Depends(get_db),
    news_service: NewsService = Depends(get_news_service),
    authorization: str | None = Header(None),
):
    """Fetch the news feed, upsert AidPoints and prune expired ones.

    Returns upserted and deleted counts. Any failure outside the per-record
    upserts (fetch, retention) yields a generic 500.
    """
    if not is_authorized(authorization):
        logger.warning("Ingest auth failed: invalid or missing bearer secret")
        return JSONResponse(status_code=401, content={"error": "Unauthorized"})

    from app.ingestion.ingest import run_ingest

    try:
        result = await run_ingest(db, news_service)
    except Exception:
        logger.exception("Error during data ingestion")
        return JSONResponse(status_code=500, content={"error": "Data ingestion failed"})

    return {
        "message": "Data ingestion successful",
        "upsertedCount": result["upserted"],
        "deletedCount": result["deleted"],
    }
