"""
Read-through cache for paginated listings, backed by Redis

Only list results are cached. Single-entity lookups always read the store.
"""
import json
import logging
from typing import Any, Callable, Optional

from .config import CACHE_TTL_SECONDS
from .redis_client import get_redis_client

logger = logging.getLogger(__name__)

# Namespaces, one per entity kind; keys look like "<namespace>:..."
CUSTOMERS = "customers"
DOCTORS = "doctors"
SCHEDULES = "schedules"


class Cache:
    """Listing cache that never fails its caller

    A Redis outage turns reads into misses and writes or invalidations into
    logged no-ops, so every request falls back to the store.
    """

    def __init__(self, client=None, client_factory: Callable = get_redis_client):
        self.redis_client = client
        self.client_factory = client_factory

    def _connection(self):
        if self.redis_client is None:
            try:
                self.redis_client = self.client_factory()
            except Exception as e:
                logger.warning(f"⚠️ Listing cache disabled, Redis unreachable: {e}")
                return None
        return self.redis_client

    def get(self, key: str) -> Optional[Any]:
        """Cached listing for key, or None on a miss, expiry or Redis error"""
        client = self._connection()
        if client is None:
            return None

        try:
            raw = client.get(key)
        except Exception as e:
            logger.error(f"❌ Cache read failed for {key}: {e}")
            return None

        if not raw:
            logger.debug(f"Cache miss: {key}")
            return None

        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning(f"⚠️ Discarding unreadable cache entry {key}")
            return None
        logger.debug(f"Cache hit: {key}")
        return value

    def set(self, key: str, value: Any, ttl: int = CACHE_TTL_SECONDS) -> bool:
        """Store a listing under key, replacing any entry and restarting its TTL"""
        client = self._connection()
        if client is None:
            return False

        try:
            client.setex(key, ttl, json.dumps(value))
        except Exception as e:
            logger.error(f"❌ Cache write failed for {key}: {e}")
            return False
        logger.debug(f"Cached {key} for {ttl}s")
        return True

    def invalidate(self, *namespaces: str) -> int:
        """
        Drop every listing of the given entity kinds.

        List keys are derived from arbitrary filter and pagination
        combinations, so a mutation clears the whole namespace rather than
        the single affected key. Returns the number of keys removed.
        """
        client = self._connection()
        if client is None:
            return 0

        removed = 0
        for namespace in namespaces:
            try:
                keys = client.keys(f"{namespace}:*")
                if keys:
                    removed += client.delete(*keys)
            except Exception as e:
                logger.error(f"❌ Cache invalidation failed for {namespace}: {e}")
        logger.info(f"🧹 Cache invalidated: {', '.join(namespaces)} ({removed} keys)")
        return removed
