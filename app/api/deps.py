"""Shared FastAPI dependencies for API routes."""

from __future__ import annotations

import logging
import secrets

from fastapi import Header, HTTPException, Request, status

from app.config import get_settings
from app.db.session import get_db  # re-export
from app.services.news_service import NewsService

logger = logging.getLogger(__name__)

__all__ = [
    "get_db",
    "get_news_service",
    "is_authorized",
    "require_ingest_secret",
]


def is_authorized(authorization: str | None) -> bool:
    """Check an ``Authorization: Bearer <secret>`` header against INGEST_SECRET.

    Uses constant-time comparison over UTF-8 bytes, so headers carrying
    non-ASCII characters are rejected rather than raising. An unset secret
    authorizes nobody.
    """
    expected = get_settings().ingest_secret
    if not expected or not authorization:
        return False
    return secrets.compare_digest(
        authorization.encode("utf-8"),
        f"Bearer {expected}".encode("utf-8"),
    )


def require_ingest_secret(authorization: str | None = Header(None)) -> None:
    """Dependency for write routes: 401 unless the bearer secret matches."""
    if not is_authorized(authorization):
        logger.warning("Write endpoint auth failed: invalid or missing bearer secret")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )


def get_news_service(request: Request) -> NewsService:
    """Return the NewsService built by the app factory."""
    return request.app.state.news_service
