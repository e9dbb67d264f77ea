"""News ingestion into AidPoints."""

from app.ingestion.aid_point_storage import RETENTION_DAYS, stable_news_link_id
from app.ingestion.ingest import run_ingest

__all__ = ["RETENTION_DAYS", "run_ingest", "stable_news_link_id"]
