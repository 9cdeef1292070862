"""Simple in-memory cache for generated insights.

Generating insights costs a model call, so each user's latest result is kept
for a day and served again until it expires or a refresh is forced.
"""
from typing import Callable, Dict, List, Optional
from datetime import datetime, timedelta, timezone
from dataclasses import dataclass

from app.insights.schemas import Insight


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CacheEntry:
    """Cached insights with expiration."""
    insights: List[Insight]
    expires_at: datetime


class InsightCache:
    """
    Per-user insight cache.

    Cache key is user_id. Default TTL is 24 hours.
    """

    def __init__(self, ttl_hours: int = 24, clock: Callable[[], datetime] = _utcnow):
        self._cache: Dict[str, CacheEntry] = {}
        self._ttl = timedelta(hours=ttl_hours)
        self._clock = clock

    def get(self, user_id: str) -> Optional[List[Insight]]:
        """Get cached insights if not expired."""
        entry = self._cache.get(user_id)

        if entry is None:
            return None

        if self._clock() >= entry.expires_at:
            # Expired, remove from cache
            del self._cache[user_id]
            return None

        return entry.insights

    def set(self, user_id: str, insights: List[Insight]) -> None:
        """Cache insights with TTL."""
        self._cache[user_id] = CacheEntry(
            insights=insights,
            expires_at=self._clock() + self._ttl,
        )

    def invalidate(self, user_id: str) -> None:
        """Drop a user's cached insights."""
        self._cache.pop(user_id, None)

    def clear(self) -> None:
        """Clear entire cache."""
        self._cache.clear()


def _build_default_cache() -> InsightCache:
    from app.config import settings
    return InsightCache(ttl_hours=settings.INSIGHTS_CACHE_HOURS)


# Global cache instance
insight_cache = _build_default_cache()
