"""Ingestion orchestrator: news feed -> classify -> upsert AidPoints -> retention."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Protocol

from sqlalchemy.orm import Session

from app.classification import classify
from app.ingestion.aid_point_storage import (
    delete_expired_aid_points,
    display_name,
    stable_news_link_id,
    upsert_aid_point,
)
from app.models.aid_point import utcnow
from app.schemas.news import RawUpdate

logger = logging.getLogger(__name__)


class UpdateSource(Protocol):
    """Anything that yields the latest filtered news updates (e.g. NewsService)."""

    async def get_latest_updates(self) -> list[RawUpdate]: ...


async def run_ingest(
    db: Session,
    source: UpdateSource,
    now: datetime | None = None,
) -> dict:
    """Run one ingestion cycle.

    Fetch failures propagate and abort the cycle before anything is written.
    A failure upserting one update is logged and skipped; the rest of the
    batch and the retention pass still run. Retention failures propagate.

    Args:
        db: Database session.
        source: Provider of the latest news updates.
        now: Timestamp for ``last_updated``/``created_at`` and the retention
            cutoff. Defaults to the current UTC time.

    Returns
    -------
    dict
        {upserted: int, created: int, skipped_unmapped: int, deleted: int, errors: list}
    """
    now = now or utcnow()
    upserted = 0
    created = 0
    skipped_unmapped = 0
    errors: list[str] = []

    logger.info("Starting data ingestion")
    updates = await source.get_latest_updates()

    for update in updates:
        result = classify(update.content)
        if not result.is_mappable:
            skipped_unmapped += 1
            continue

        news_link_id = stable_news_link_id(update.content, update.link)
        try:
            _, was_created = upsert_aid_point(
                db,
                news_link_id=news_link_id,
                name=display_name(result.place_name, result.type, result.location),
                description=update.content,
                location=result.location,
                needs=result.needs,
                ngo_link=update.link,
                category=result.type,
                status=result.status,
                now=now,
            )
            upserted += 1
            if was_created:
                created += 1
        except Exception as e:
            db.rollback()
            errors.append(f"{news_link_id}: {e}")
            logger.exception("Error upserting AidPoint for %s", news_link_id)

    deleted = delete_expired_aid_points(db, now=now)

    logger.info(
        "Data ingestion complete. Upserted: %d (new: %d), skipped: %d, deleted old records: %d",
        upserted,
        created,
        skipped_unmapped,
        deleted,
    )
    return {
        "upserted": upserted,
        "created": created,
        "skipped_unmapped": skipped_unmapped,
        "deleted": deleted,
        "errors": errors,
    }
