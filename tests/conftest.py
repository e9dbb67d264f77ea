"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from tests.test_constants import TEST_INGEST_SECRET, TEST_NEWS_API_URL, TEST_NEWS_SITE_URL

# Tests never touch PostgreSQL; don't inherit DATABASE_URL from .env
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["INGEST_SECRET"] = TEST_INGEST_SECRET
os.environ["NEWS_API_URL"] = TEST_NEWS_API_URL
os.environ["NEWS_SITE_URL"] = TEST_NEWS_SITE_URL


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    from app.main import app

    return TestClient(app)


@pytest.fixture
def client_with_db(db: Session) -> TestClient:
    """TestClient with get_db overridden to use the test db session."""
    from app.db.session import get_db
    from app.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    c = TestClient(app)
    yield c
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def db() -> Session:
    """Fresh in-memory database per test; schema built from the models."""
    from app.db.session import Base
    from app.models import AidPoint  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = Session(bind=engine, expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()
