#!/usr/bin/env python3
"""Run one news ingestion cycle locally or from cron.

Usage:
    python scripts/run_ingest.py

Fetches the news feed, upserts AidPoints and prunes records past retention.
Exits 0 on success, 1 on failure.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config import get_settings
from app.db.session import SessionLocal
from app.ingestion.ingest import run_ingest
from app.services.news_service import NewsService


def main() -> int:
    news_service = NewsService.from_settings(get_settings())
    db = SessionLocal()
    try:
        result = asyncio.run(run_ingest(db, news_service))
        print(
            f"upserted={result['upserted']} "
            f"created={result['created']} "
            f"skipped_unmapped={result['skipped_unmapped']} "
            f"deleted={result['deleted']}"
        )
        for error in result["errors"]:
            print(f"error={error}", file=sys.stderr)
        return 0
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
