"""
Cache Store Factory for creating the process-wide cache store.
"""
import os
from shared.modules.book.models.page_response import PageResponse
from shared.modules.cache.cache_store import CacheStore
from shared.modules.cache.in_memory_cache_store import InMemoryCacheStore
from shared.modules.cache.redis_cache_store import RedisCacheStore


class CacheStoreFactory:
    """
    Factory for creating CacheStore instances based on environment.
    """

    @staticmethod
    def create_cache_store() -> CacheStore:
        """
        Create the CacheStore selected by the `CACHE_BACKEND` environment variable.

        Returns:
            CacheStore: InMemoryCacheStore ("memory", default) or RedisCacheStore ("redis")
        """
        backend = os.getenv("CACHE_BACKEND", "memory").lower()
        ttl_seconds = int(os.getenv("CACHE_TTL_SECONDS", 300))

        if backend == "memory":
            max_entries = int(os.getenv("CACHE_MAX_ENTRIES", 1024))
            return InMemoryCacheStore(maxsize=max_entries, ttl_seconds=ttl_seconds)
        if backend == "redis":
            return RedisCacheStore(
                model=PageResponse,
                host=os.getenv("REDIS_HOST", "localhost"),
                port=int(os.getenv("REDIS_PORT", 6379)),
                ttl_seconds=ttl_seconds,
            )
        raise ValueError(f"Unsupported CACHE_BACKEND: {backend}")
