import threading
from typing import Any, Optional

from cachetools import TTLCache

from .cache_store import CacheStore


class InMemoryCacheStore(CacheStore):
    """
    Process-local cache backed by cachetools.TTLCache.
    Entries expire after ttl_seconds and the least recently used entry is
    evicted once maxsize is reached. Hits return the stored object itself.
    """

    def __init__(self, maxsize: int = 1024, ttl_seconds: float = 300):
        self._cache: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl_seconds)
        # TTLCache is not thread-safe on its own
        self._lock = threading.Lock()

    def get(self, cache_key: str) -> Optional[Any]:
        with self._lock:
            return self._cache.get(cache_key)

    def set(self, cache_key: str, value: Any) -> None:
        with self._lock:
            self._cache[cache_key] = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
