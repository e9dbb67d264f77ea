"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "AidMap"
    debug: bool = False
    base_url: str = "http://localhost:8000"

    # Database (postgresql+psycopg for psycopg3; use postgresql:// for psycopg2)
    database_url: str = "postgresql+psycopg://localhost:5432/aidmap_dev"
    db_connect_timeout: int = 10  # seconds

    # Security
    ingest_secret: str = ""  # Required for /ingest-data and AidPoint writes

    # News source
    news_site_url: str = "https://www.aljazeera.net"
    news_api_url: str = ""  # defaults to {base_url}/api/get-liveblog-news
    news_cache_ttl_seconds: float = 300.0
    news_fetch_max_retries: int = 3
    news_fetch_timeout: float = 15.0

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.base_url = os.getenv("BASE_URL", self.base_url).rstrip("/")

        default_user = os.getenv("PGUSER") or os.getenv("USER") or "postgres"
        default_url = (
            f"postgresql+psycopg://{default_user}:"
            f"{os.getenv('PGPASSWORD', '')}@"
            f"{os.getenv('PGHOST', 'localhost')}:"
            f"{os.getenv('PGPORT', '5432')}/"
            f"{os.getenv('PGDATABASE', 'aidmap_dev')}"
        )
        raw_url = os.getenv("DATABASE_URL", default_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

        self.ingest_secret = os.getenv("INGEST_SECRET", "")

        self.news_site_url = os.getenv("NEWS_SITE_URL", self.news_site_url).rstrip("/")
        self.news_api_url = (
            os.getenv("NEWS_API_URL") or f"{self.base_url}/api/get-liveblog-news"
        )
        self.news_cache_ttl_seconds = float(
            os.getenv("NEWS_CACHE_TTL_SECONDS", str(self.news_cache_ttl_seconds))
        )
        self.news_fetch_max_retries = int(
            os.getenv("NEWS_FETCH_MAX_RETRIES", str(self.news_fetch_max_retries))
        )
        self.news_fetch_timeout = float(
            os.getenv("NEWS_FETCH_TIMEOUT", str(self.news_fetch_timeout))
        )
