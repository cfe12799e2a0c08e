"""
Read-through TTL cache for engineer detail pages

Entries expire a fixed time after insertion. Two concurrent misses for the
same id may both hit the database; the last snapshot stored wins.
"""
import logging
from datetime import timedelta
from typing import Any, Awaitable, Callable, Optional

from cachetools import TTLCache

from hanuram.exceptions import NotFoundError
from hanuram.utils.metrics import PROFILE_CACHE_REQUESTS
from hanuram.utils.timezone import Clock, utc_now_naive

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[Optional[Any]]]


class ProfileCache:
    """
    Engineer detail lookups served from memory while fresh.

    Args:
        fetcher: awaitable returning an immutable snapshot (pydantic model)
            for an engineer id, or None when the id is unknown
        ttl: lifetime of a cached snapshot
        clock: returns naive UTC "now"
        maxsize: most snapshots held at once; the least recently used go first
    """

    def __init__(
        self,
        fetcher: Fetcher,
        ttl: timedelta = timedelta(minutes=10),
        clock: Clock = utc_now_naive,
        maxsize: int = 256,
    ):
        self.fetcher = fetcher
        self._cache = TTLCache(maxsize=maxsize, ttl=ttl, timer=clock)

    @staticmethod
    def cache_key(engineer_id: str) -> str:
        return f"engineer-detail-{engineer_id}"

    async def get_detail(self, engineer_id: str):
        key = self.cache_key(engineer_id)
        cached = self._cache.get(key)
        if cached is not None:
            PROFILE_CACHE_REQUESTS.labels("hit").inc()
            return cached.model_copy(deep=True)

        PROFILE_CACHE_REQUESTS.labels("miss").inc()
        profile = await self.fetcher(engineer_id)
        if profile is None:
            logger.info("Engineer %s not found", engineer_id)
            raise NotFoundError(f"Engineer with ID {engineer_id} not found.")

        snapshot = profile.model_copy(deep=True)
        self._cache[key] = snapshot
        return snapshot.model_copy(deep=True)

    def invalidate(self, engineer_id: str) -> None:
        self._cache.pop(self.cache_key(engineer_id), None)

    def clear(self) -> None:
        self._cache.clear()
