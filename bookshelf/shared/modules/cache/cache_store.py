from abc import ABC, abstractmethod
from typing import Any, Optional


# Abstract cache interface (in-memory, Redis, etc.)
# Eviction and expiry are owned by each implementation.
class CacheStore(ABC):
    @abstractmethod
    def get(self, cache_key: str) -> Optional[Any]:
        """Return the stored value, or None when absent."""
        raise NotImplementedError

    @abstractmethod
    def set(self, cache_key: str, value: Any) -> None:
        raise NotImplementedError
