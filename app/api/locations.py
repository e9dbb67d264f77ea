"""Map read API: aggregated ReliefLocations."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.relief_location import ReliefLocation
from app.services.location_service import get_relief_locations

router = APIRouter()


@router.get("", response_model=list[ReliefLocation])
def api_list_locations(
    db: Session = Depends(get_db),
    day: date | None = Query(
        None,
        alias="date",
        description="UTC day (YYYY-MM-DD); only points last updated that day",
    ),
) -> list[ReliefLocation]:
    """ReliefLocations computed live from the AidPoint table."""
    return get_relief_locations(db, day=day)
