"""AidPoint schemas for request/response validation."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.classification.types import Category, Status


def _decode_needs(value: object) -> object:
    """Accept the stored JSON string as well as a plain list."""
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            return []
        return decoded if isinstance(decoded, list) else []
    return value


class AidPointCreate(BaseModel):
    """Schema for creating an AidPoint by hand (outside ingestion)."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    needs: list[str] = Field(default_factory=list)
    ngo_link: Optional[str] = Field(None, max_length=2048)
    category: Category
    status: Status = Status.ACTIVE
    news_link_id: str = Field(..., min_length=1, max_length=64)


class AidPointUpdate(BaseModel):
    """Schema for updating an AidPoint. All fields optional."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    needs: Optional[list[str]] = None
    ngo_link: Optional[str] = Field(None, max_length=2048)
    category: Optional[Category] = None
    status: Optional[Status] = None


class AidPointRead(BaseModel):
    """Schema for reading an AidPoint (response). ``needs`` is decoded."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    latitude: float
    longitude: float
    needs: list[str]
    ngo_link: Optional[str] = None
    category: str
    status: str
    last_updated: datetime
    created_at: datetime
    news_link_id: str

    @field_validator("needs", mode="before")
    @classmethod
    def parse_needs(cls, value: object) -> object:
        return _decode_needs(value)


class AidPointCount(BaseModel):
    total: int
