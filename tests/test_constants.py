"""
Centralized test credentials and secrets.

Test-only values load from environment variables when available, with
clearly non-production placeholders as fallbacks.
"""

from __future__ import annotations

import os

# Shared secret for /ingest-data and AidPoint writes
TEST_INGEST_SECRET = os.environ.get("TEST_INGEST_SECRET") or "test-ingest-secret"
TEST_AUTH_HEADER = {"Authorization": f"Bearer {TEST_INGEST_SECRET}"}

# Upstream URLs; never contacted, httpx is always mocked
TEST_NEWS_API_URL = "http://news.test/api/get-liveblog-news"
TEST_NEWS_SITE_URL = "https://news.test"
