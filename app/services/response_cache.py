"""Time-boxed in-memory cache for upstream responses."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class ResponseCache:
    """Keyed cache whose entries expire after a caller-supplied TTL.

    Entries are only replaced through ``get_or_fetch``; there is no
    background eviction. Not coordinated across concurrent callers: two
    callers that miss at the same time both fetch, and the last one wins.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    async def get_or_fetch(
        self,
        key: str,
        ttl: float,
        fetch: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return the cached value for *key* if younger than *ttl* seconds.

        Otherwise await *fetch*, store its result and return it. Exceptions
        from *fetch* propagate and leave the previous entry untouched.
        """
        now = self._clock()
        entry = self._entries.get(key)
        if entry is not None:
            stored_at, value = entry
            if now - stored_at <= ttl:
                logger.debug("Cache hit for %s (age %.1fs)", key, now - stored_at)
                return value

        value = await fetch()
        self._entries[key] = (self._clock(), value)
        return value

    def invalidate(self, key: str | None = None) -> None:
        """Drop one entry, or every entry when *key* is None."""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)
