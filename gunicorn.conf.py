"""
Gunicorn configuration for AidMap production deployment.

Usage:
    gunicorn app.main:app -c gunicorn.conf.py

Each worker holds its own NewsService response cache, so with N workers
the upstream feed can be fetched up to N times per cache TTL.
"""

import multiprocessing
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"

# Default: CPU cores * 2 + 1; override with WEB_CONCURRENCY
workers = int(os.getenv("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))

worker_class = "uvicorn.workers.UvicornWorker"

# POST /ingest-data waits on up to three feed attempts plus backoff
timeout = int(os.getenv("GUNICORN_TIMEOUT", "120"))
graceful_timeout = 30
keepalive = 5

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
