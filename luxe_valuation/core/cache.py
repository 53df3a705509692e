import json
from dataclasses import asdict
from typing import Any, List, Optional, Tuple

from cachetools import TTLCache

from .config import settings
from ..data.base import PropertyRecord

# Serialized valuation payloads and listing pools; both are shared across workers when Redis is on.
_local_cache = TTLCache(maxsize=4096, ttl=settings.CACHE_TTL_SECONDS)

try:
    import redis  # Optional dependency
except ImportError:
    redis = None

VALUATION_PREFIX = "valuation"
LISTINGS_PREFIX = "listings"
RATE_PREFIX = "rate"


def cache_key(prefix: str, *parts: Any) -> str:
    return ":".join([prefix, *(str(p) for p in parts)])


def dump_payload(payload: Any) -> str:
    """Compact JSON body; the same text is cached and hashed into the ETag."""
    return json.dumps(payload, separators=(',', ':'))


class Cache:
    """
    Redis or in-memory store of valuation payloads, listing pools and
    rate-limit counters. Raw values are always strings.
    """
    def __init__(self):
        self.backend = None
        if settings.USE_REDIS and redis is not None:
            self.backend = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)

    def get(self, key: str) -> Optional[str]:
        if self.backend:
            return self.backend.get(key)
        return _local_cache.get(key)

    def set(self, key: str, value: str, ttl: int | None = None) -> None:
        if self.backend:
            self.backend.setex(key, ttl or settings.CACHE_TTL_SECONDS, value)
        else:
            _local_cache[key] = value

    def clear(self) -> None:
        # Only the in-process store; Redis keys expire on their own.
        if not self.backend:
            _local_cache.clear()

    # ----- valuation payloads -----

    def get_valuation(self, key: str) -> Optional[Tuple[dict, str]]:
        """Cached (payload, body) pair, or None on a miss."""
        body = self.get(key)
        if not body:
            return None
        return json.loads(body), body

    def set_valuation(self, key: str, payload: dict) -> str:
        body = dump_payload(payload)
        self.set(key, body)
        return body

    # ----- listing pools -----

    def get_listings(self, key: str) -> Optional[List[PropertyRecord]]:
        body = self.get(key)
        if not body:
            return None
        return [
            PropertyRecord(**{**row, "amenities": tuple(row.get("amenities") or ())})
            for row in json.loads(body)
        ]

    def set_listings(self, key: str, records: List[PropertyRecord]) -> None:
        self.set(key, dump_payload([asdict(rec) for rec in records]))

    # ----- counters -----

    def bump(self, key: str, ttl: int) -> int:
        """Increment a per-window counter; a missing or garbled value restarts at 1."""
        try:
            count = int(self.get(key) or 0) + 1
        except ValueError:
            count = 1
        self.set(key, str(count), ttl=ttl)
        return count

cache = Cache()
