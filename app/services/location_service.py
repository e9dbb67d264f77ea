"""Group AidPoints into map-ready ReliefLocations.

Points that share a rounded coordinate (4 decimals, about 11 m) and a
display name are one physical location: their needs are merged and their
news items listed together. Distinct locations that land in the same
rounded cell are fanned out on a small spiral so their markers do not
overlap. Nothing computed here is written back to the database.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from sqlalchemy.orm import Session

from app.schemas.relief_location import NewsUpdate, ReliefLocation
from app.services.aid_point_service import list_aid_points, list_aid_points_updated_on

COORDINATE_PRECISION = 4
JITTER_STEP_DEGREES = 0.002  # roughly 200 m per step


@dataclass
class _Group:
    seed: Any
    needs: list[str]
    news_updates: list[NewsUpdate]
    last_updated: datetime
    cell: str
    offset: tuple[float, float] = (0.0, 0.0)


def _needs_of(point: Any) -> list[str]:
    raw = point.needs
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return []
    if not isinstance(raw, list):
        return []
    return [str(need) for need in raw]


def cell_key(latitude: float, longitude: float) -> str:
    return f"{round(latitude, COORDINATE_PRECISION)},{round(longitude, COORDINATE_PRECISION)}"


def group_key(latitude: float, longitude: float, name: str) -> str:
    return f"{cell_key(latitude, longitude)}|{name}"


def _news_update(point: Any) -> NewsUpdate:
    return NewsUpdate(
        time=point.last_updated.isoformat(),
        content=point.description or "",
        link=point.ngo_link or None,
    )


def jitter_offset(index: int, count: int) -> tuple[float, float]:
    """Polar offset for the *index*-th of *count* groups sharing a cell."""
    if count <= 1 or index == 0:
        return 0.0, 0.0
    angle = 2 * math.pi * index / count
    radius = JITTER_STEP_DEGREES * index
    return radius * math.cos(angle), radius * math.sin(angle)


def normalize(points: Iterable[Any]) -> list[ReliefLocation]:
    """Merge points into ReliefLocations, in first-seen order.

    Jitter indices follow the order in which groups first appear in
    *points*, so the same rows enumerated in a different order can be
    fanned out differently. Callers wanting stable offsets must pass a
    stable order.
    """
    groups: dict[str, _Group] = {}
    for point in points:
        key = group_key(point.latitude, point.longitude, point.name)
        group = groups.get(key)
        if group is None:
            groups[key] = _Group(
                seed=point,
                needs=list(dict.fromkeys(_needs_of(point))),
                news_updates=[_news_update(point)],
                last_updated=point.last_updated,
                cell=cell_key(point.latitude, point.longitude),
            )
            continue
        for need in _needs_of(point):
            if need not in group.needs:
                group.needs.append(need)
        group.news_updates.append(_news_update(point))
        if point.last_updated > group.last_updated:
            group.last_updated = point.last_updated

    cells: dict[str, list[_Group]] = {}
    for group in groups.values():
        cells.setdefault(group.cell, []).append(group)
    for members in cells.values():
        for index, group in enumerate(members):
            group.offset = jitter_offset(index, len(members))

    locations: list[ReliefLocation] = []
    for group in groups.values():
        seed = group.seed
        origin = (seed.latitude, seed.longitude)
        locations.append(
            ReliefLocation(
                id=str(seed.id),
                name=seed.name,
                location=(origin[0] + group.offset[0], origin[1] + group.offset[1]),
                origin=origin,
                type=seed.category,
                status=seed.status,
                last_updated=group.last_updated,
                description=seed.description,
                needs=group.needs,
                news_updates=group.news_updates,
            )
        )
    return locations


def get_relief_locations(db: Session, day: date | None = None) -> list[ReliefLocation]:
    """Aggregate AidPoints into ReliefLocations, newest first.

    With *day*, only points whose ``last_updated`` falls on that UTC day.
    Rows arrive in a total order (timestamp, then ``id`` descending), so
    jitter offsets do not change between reads of an unchanged table.
    """
    points = list_aid_points_updated_on(db, day) if day is not None else list_aid_points(db)
    return normalize(points)
