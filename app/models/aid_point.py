"""AidPoint model."""

from __future__ import annotations

import json
from datetime import UTC, datetime

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


def utcnow() -> datetime:
    """Naive UTC timestamp; columns are timezone-less and always hold UTC."""
    return datetime.now(UTC).replace(tzinfo=None)


class AidPoint(Base):
    """One ingested, geotagged humanitarian news update."""

    __tablename__ = "aid_points"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    # JSON-encoded list of strings, e.g. '["Food", "Water"]'
    needs: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    ngo_link: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    category: Mapped[str] = mapped_column(String(32), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="ACTIVE")
    last_updated: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, nullable=False, index=True
    )
    # sha256 of the source link (or content): the upsert key
    news_link_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)

    @property
    def needs_list(self) -> list[str]:
        """Decode ``needs``; malformed or non-list JSON yields []."""
        try:
            value = json.loads(self.needs or "[]")
        except (TypeError, ValueError):
            return []
        if not isinstance(value, list):
            return []
        return [str(item) for item in value]
