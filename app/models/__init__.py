"""SQLAlchemy models."""

from app.models.aid_point import AidPoint

__all__ = ["AidPoint"]
