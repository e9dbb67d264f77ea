"""AidPoint CRUD: list, count, lookup, manual create/update/delete."""

from __future__ import annotations

import json
from datetime import date, datetime, time, timedelta

from sqlalchemy.orm import Session

from app.models.aid_point import AidPoint, utcnow
from app.schemas.aid_point import AidPointCreate, AidPointUpdate

_NON_NULLABLE_FIELDS = ("name", "latitude", "longitude", "category", "status")


class AidPointConflictError(ValueError):
    """Raised when creating an AidPoint whose news_link_id already exists."""


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Half-open UTC range ``[day 00:00, next day 00:00)``."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def list_aid_points(db: Session) -> list[AidPoint]:
    """All AidPoints, newest ``created_at`` first.

    Rows from one ingestion cycle share ``created_at``; ``id`` descending
    breaks the tie so the order is stable between reads.
    """
    return db.query(AidPoint).order_by(AidPoint.created_at.desc(), AidPoint.id.desc()).all()


def list_aid_points_updated_on(db: Session, day: date) -> list[AidPoint]:
    """AidPoints whose ``last_updated`` falls on *day* (UTC), most recent first, then ``id`` descending."""
    start, end = day_bounds(day)
    return (
        db.query(AidPoint)
        .filter(AidPoint.last_updated >= start, AidPoint.last_updated < end)
        .order_by(AidPoint.last_updated.desc(), AidPoint.id.desc())
        .all()
    )


def count_aid_points(db: Session) -> int:
    return db.query(AidPoint).count()


def get_aid_point(db: Session, aid_point_id: int) -> AidPoint | None:
    return db.query(AidPoint).filter(AidPoint.id == aid_point_id).first()


def create_aid_point(db: Session, data: AidPointCreate) -> AidPoint:
    """Create an AidPoint by hand.

    Raises AidPointConflictError if the news_link_id is already taken.
    """
    existing = db.query(AidPoint).filter(AidPoint.news_link_id == data.news_link_id).first()
    if existing is not None:
        raise AidPointConflictError("An AidPoint with this news_link_id already exists")

    now = utcnow()
    values = data.model_dump()
    values["needs"] = json.dumps(values["needs"], ensure_ascii=False)
    values["category"] = data.category.value
    values["status"] = data.status.value
    point = AidPoint(**values, created_at=now, last_updated=now)
    db.add(point)
    db.commit()
    db.refresh(point)
    return point


def update_aid_point(db: Session, aid_point_id: int, data: AidPointUpdate) -> AidPoint | None:
    """Apply the fields set on *data*. Returns None if the AidPoint does not exist."""
    point = get_aid_point(db, aid_point_id)
    if point is None:
        return None

    changes = data.model_dump(exclude_unset=True)
    for required in _NON_NULLABLE_FIELDS:
        if required in changes and changes[required] is None:
            del changes[required]
    if "needs" in changes:
        changes["needs"] = json.dumps(changes["needs"] or [], ensure_ascii=False)
    if "category" in changes:
        changes["category"] = data.category.value
    if "status" in changes:
        changes["status"] = data.status.value
    for attr, value in changes.items():
        setattr(point, attr, value)
    point.last_updated = utcnow()
    db.commit()
    db.refresh(point)
    return point


def delete_aid_point(db: Session, aid_point_id: int) -> bool:
    """Hard-delete an AidPoint. Returns False if it did not exist."""
    point = get_aid_point(db, aid_point_id)
    if point is None:
        return False
    db.delete(point)
    db.commit()
    return True
