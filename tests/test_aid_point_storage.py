"""Tests for AidPoint upsert and retention."""

from __future__ import annotations

import json
from datetime import datetime, timedelta

from app.classification import Category, Status
from app.ingestion.aid_point_storage import (
    RETENTION_DAYS,
    delete_expired_aid_points,
    display_name,
    stable_news_link_id,
    upsert_aid_point,
)
from app.models.aid_point import AidPoint

NOW = datetime(2026, 10, 19, 6, 0, 0)


def _upsert(db, key="k1", now=NOW, **overrides):
    fields = {
        "news_link_id": key,
        "name": "مستشفى الشفاء",
        "description": "مستشفى الشفاء يحتاج إلى مستلزمات طبية",
        "location": (31.5231, 34.4667),
        "needs": ["Medical Supplies", "Staff"],
        "ngo_link": "https://news.test/live?update=1",
        "category": Category.MEDICAL,
        "status": Status.ACTIVE,
        "now": now,
    }
    fields.update(overrides)
    return upsert_aid_point(db, **fields)


class TestStableNewsLinkId:
    def test_uses_link_when_present(self):
        assert stable_news_link_id("a", "https://x") == stable_news_link_id("b", "https://x")

    def test_falls_back_to_content(self):
        assert stable_news_link_id("a", "") == stable_news_link_id("a", None)
        assert stable_news_link_id("a") != stable_news_link_id("b")

    def test_fits_column(self):
        assert len(stable_news_link_id("محتوى")) == 64


class TestDisplayName:
    def test_place_name_preferred(self):
        assert display_name("رفح", Category.FOOD, (31.2968, 34.2435)) == "رفح"

    def test_category_and_coordinates(self):
        assert display_name(None, Category.SUPPLIES, (31.5017, 34.4668)) == "SUPPLIES - 31.5017, 34.4668"


class TestUpsert:
    def test_creates_row(self, db):
        point, created = _upsert(db)
        assert created is True
        assert point.id is not None
        assert json.loads(point.needs) == ["Medical Supplies", "Staff"]
        assert point.category == "MEDICAL"
        assert point.created_at == NOW
        assert point.last_updated == NOW

    def test_update_refreshes_fields_but_keeps_created_at(self, db):
        first, _ = _upsert(db)
        later = NOW + timedelta(hours=3)
        second, created = _upsert(
            db,
            now=later,
            status=Status.NEEDS_SUPPORT,
            needs=["Blood"],
        )
        assert created is False
        assert second.id == first.id
        assert second.created_at == NOW
        assert second.last_updated == later
        assert second.status == "NEEDS_SUPPORT"
        assert second.needs_list == ["Blood"]
        assert db.query(AidPoint).count() == 1

    def test_same_input_twice_is_one_row(self, db):
        _upsert(db)
        _upsert(db)
        assert db.query(AidPoint).count() == 1

    def test_distinct_keys_distinct_rows(self, db):
        _upsert(db, key="k1")
        _upsert(db, key="k2")
        assert db.query(AidPoint).count() == 2

    def test_empty_link_stored_as_null(self, db):
        point, _ = _upsert(db, ngo_link="")
        assert point.ngo_link is None


class TestRetention:
    def test_91_days_deleted_89_days_kept(self, db):
        _upsert(db, key="old", now=NOW - timedelta(days=91))
        _upsert(db, key="recent", now=NOW - timedelta(days=89))
        deleted = delete_expired_aid_points(db, now=NOW)
        assert deleted == 1
        assert [p.news_link_id for p in db.query(AidPoint).all()] == ["recent"]

    def test_age_counts_from_creation_not_last_update(self, db):
        _upsert(db, key="old", now=NOW - timedelta(days=91))
        # refreshed yesterday, but created 91 days ago
        _upsert(db, key="old", now=NOW - timedelta(days=1))
        assert delete_expired_aid_points(db, now=NOW) == 1

    def test_exactly_at_cutoff_kept(self, db):
        _upsert(db, key="edge", now=NOW - timedelta(days=RETENTION_DAYS))
        assert delete_expired_aid_points(db, now=NOW) == 0

    def test_nothing_to_delete(self, db):
        assert delete_expired_aid_points(db, now=NOW) == 0
