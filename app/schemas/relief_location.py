"""ReliefLocation view model: map-ready aggregation of AidPoints."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class NewsUpdate(BaseModel):
    time: str
    content: str
    link: Optional[str] = None


class ReliefLocation(BaseModel):
    """One map marker. Never persisted; rebuilt from AidPoints on every read.

    ``location`` is the displayed (possibly jittered) coordinate;
    ``origin`` is the un-jittered coordinate of the seeding AidPoint.
    """

    id: str
    name: str
    location: tuple[float, float]
    origin: tuple[float, float]
    type: str
    status: str
    last_updated: datetime
    description: Optional[str] = None
    needs: list[str] = Field(default_factory=list)
    news_updates: list[NewsUpdate] = Field(default_factory=list)
