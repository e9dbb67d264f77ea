"""Upsert and retention for ingested AidPoints."""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.classification.types import Category, Status
from app.models.aid_point import AidPoint, utcnow

logger = logging.getLogger(__name__)

RETENTION_DAYS: int = 90


def stable_news_link_id(content: str, link: str | None = None) -> str:
    """sha256 hex of the link, or of the content when there is no link."""
    source = link if link else content
    return hashlib.sha256(source.encode("utf-8")).hexdigest()


def display_name(
    place_name: str | None,
    category: Category | str,
    location: tuple[float, float],
) -> str:
    """Place name, or ``"<CATEGORY> - <lat>, <lon>"`` when there is none."""
    if place_name:
        return place_name
    label = category.value if isinstance(category, Category) else str(category)
    return f"{label} - {location[0]:.4f}, {location[1]:.4f}"


def upsert_aid_point(
    db: Session,
    *,
    news_link_id: str,
    name: str,
    description: str,
    location: tuple[float, float],
    needs: list[str],
    ngo_link: str | None,
    category: Category | str,
    status: Status | str = Status.ACTIVE,
    now: datetime | None = None,
) -> tuple[AidPoint, bool]:
    """Insert or refresh the AidPoint keyed by *news_link_id*.

    The update path rewrites every mutable field and ``last_updated`` but
    never ``created_at``. Commits on success.

    Returns
    -------
    tuple[AidPoint, bool]
        The row and whether it was newly created.
    """
    now = now or utcnow()
    fields = {
        "name": name,
        "description": description,
        "latitude": location[0],
        "longitude": location[1],
        "needs": json.dumps(list(needs or []), ensure_ascii=False),
        "ngo_link": ngo_link or None,
        "category": Category(category).value,
        "status": Status(status or Status.ACTIVE).value,
        "last_updated": now,
    }

    existing = db.query(AidPoint).filter(AidPoint.news_link_id == news_link_id).first()
    if existing is not None:
        for attr, value in fields.items():
            setattr(existing, attr, value)
        db.commit()
        db.refresh(existing)
        logger.debug("AidPoint updated: news_link_id=%s", news_link_id)
        return existing, False

    point = AidPoint(news_link_id=news_link_id, created_at=now, **fields)
    db.add(point)
    db.commit()
    db.refresh(point)
    logger.debug("AidPoint created: news_link_id=%s", news_link_id)
    return point, True


def delete_expired_aid_points(db: Session, now: datetime | None = None) -> int:
    """Hard-delete AidPoints created more than RETENTION_DAYS ago. Returns count."""
    cutoff = (now or utcnow()) - timedelta(days=RETENTION_DAYS)
    deleted = (
        db.query(AidPoint)
        .filter(AidPoint.created_at < cutoff)
        .delete(synchronize_session="fetch")
    )
    db.commit()
    if deleted:
        logger.info("Retention: deleted %d AidPoints created before %s", deleted, cutoff.isoformat())
    return deleted
