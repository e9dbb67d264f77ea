"""Tests for the scripts/run_ingest.py cron entry point."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

from app.models.aid_point import AidPoint
from app.schemas.news import RawUpdate
from app.services.news_service import NewsFetchError

SCRIPT_PATH = Path(__file__).resolve().parent.parent / "scripts" / "run_ingest.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("run_ingest_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


run_ingest_script = _load_script()


class FakeSource:
    def __init__(self, updates=None, error: Exception | None = None) -> None:
        self.updates = updates or []
        self.error = error

    async def get_latest_updates(self) -> list[RawUpdate]:
        if self.error is not None:
            raise self.error
        return list(self.updates)


class TestRunIngestScript:
    """Tests for run_ingest.py main()."""

    @patch("run_ingest_script.NewsService")
    @patch("run_ingest_script.SessionLocal")
    def test_success_returns_zero_and_prints_counts(
        self, mock_session_local, mock_news_service, db, capsys
    ) -> None:
        mock_session_local.return_value = db
        mock_news_service.from_settings.return_value = FakeSource(
            [
                RawUpdate(link="https://news.test/1", content="مستشفى الشفاء يحتاج إلى مستلزمات طبية"),
                RawUpdate(link="https://news.test/2", content="طقس معتدل اليوم"),
            ]
        )

        assert run_ingest_script.main() == 0

        out = capsys.readouterr().out
        assert "upserted=1" in out
        assert "skipped_unmapped=1" in out
        assert db.query(AidPoint).count() == 1

    @patch("run_ingest_script.NewsService")
    @patch("run_ingest_script.SessionLocal")
    def test_fetch_failure_returns_one(self, mock_session_local, mock_news_service, capsys) -> None:
        mock_db = MagicMock()
        mock_session_local.return_value = mock_db
        mock_news_service.from_settings.return_value = FakeSource(error=NewsFetchError("down"))

        assert run_ingest_script.main() == 1

        assert "ERROR: down" in capsys.readouterr().err
        mock_db.close.assert_called_once()
