"""AidPoint API routes. Reads are public; writes need the ingest secret."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import require_ingest_secret
from app.db.session import get_db
from app.schemas.aid_point import AidPointCount, AidPointCreate, AidPointRead, AidPointUpdate
from app.services.aid_point_service import (
    AidPointConflictError,
    count_aid_points,
    create_aid_point,
    delete_aid_point,
    get_aid_point,
    list_aid_points,
    list_aid_points_updated_on,
    update_aid_point,
)

router = APIRouter()


@router.get("", response_model=list[AidPointRead])
def api_list_aid_points(
    db: Session = Depends(get_db),
    day: date | None = Query(None, alias="date", description="UTC day (YYYY-MM-DD)"),
) -> list[AidPointRead]:
    """List AidPoints, newest first; optionally only those updated on *date*."""
    if day is not None:
        return list_aid_points_updated_on(db, day)
    return list_aid_points(db)


@router.get("/count", response_model=AidPointCount)
def api_count_aid_points(db: Session = Depends(get_db)) -> AidPointCount:
    return AidPointCount(total=count_aid_points(db))


@router.get("/{aid_point_id}", response_model=AidPointRead)
def api_get_aid_point(aid_point_id: int, db: Session = Depends(get_db)) -> AidPointRead:
    point = get_aid_point(db, aid_point_id)
    if point is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return point


@router.post("", response_model=AidPointRead, status_code=201)
def api_create_aid_point(
    data: AidPointCreate,
    db: Session = Depends(get_db),
    _auth: None = Depends(require_ingest_secret),
) -> AidPointRead:
    try:
        return create_aid_point(db, data)
    except AidPointConflictError:
        raise HTTPException(
            status_code=409,
            detail="An AidPoint with this news_link_id already exists",
        )


@router.patch("/{aid_point_id}", response_model=AidPointRead)
def api_update_aid_point(
    aid_point_id: int,
    data: AidPointUpdate,
    db: Session = Depends(get_db),
    _auth: None = Depends(require_ingest_secret),
) -> AidPointRead:
    point = update_aid_point(db, aid_point_id, data)
    if point is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return point


@router.delete("/{aid_point_id}", status_code=204)
def api_delete_aid_point(
    aid_point_id: int,
    db: Session = Depends(get_db),
    _auth: None = Depends(require_ingest_secret),
) -> None:
    if not delete_aid_point(db, aid_point_id):
        raise HTTPException(status_code=404, detail="Location not found")
