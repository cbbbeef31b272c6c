"""
Redis Cache Store

Cache store shared by every backend process through Redis. Values are
pydantic models, written as JSON with an expiry and rebuilt into `model`
on read.
"""
import logging
from typing import Optional, Type

import redis
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .cache_store import CacheStore


class RedisCacheStore(CacheStore):
    """
    Best-effort Redis cache. Connection problems and unreadable payloads are
    logged and reported as a miss (get) or ignored (set), so a Redis outage
    only costs the extra storage queries.
    """

    def __init__(self, model: Type[BaseModel], host: str = "localhost", port: int = 6379,
                 ttl_seconds: int = 300, redis_client=None, logger=None):
        """
        Args:
            model (Type[BaseModel]): Model class used to decode cached values.
            host (str): The Redis server hostname.
            port (int): The Redis server port.
            ttl_seconds (int): Expiry applied to every written key.
            redis_client: Optional pre-built client, mainly for tests.
        """
        self.model = model
        self.ttl_seconds = ttl_seconds
        self.redis_client = redis_client or redis.StrictRedis(
            host=host,
            port=port,
            db=0,
            decode_responses=True
        )
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def get(self, cache_key: str) -> Optional[BaseModel]:
        try:
            payload = self.redis_client.get(cache_key)
        except redis.exceptions.RedisError as e:
            self.logger.warning(f"Redis get failed for '{cache_key}': {e}")
            return None

        if payload is None:
            return None

        try:
            return self.model.model_validate_json(payload)
        except ValidationError as e:
            self.logger.warning(f"Discarding unreadable cache entry '{cache_key}': {e}")
            return None

    def set(self, cache_key: str, value: BaseModel) -> None:
        try:
            payload = value.model_dump_json()
        except PydanticSerializationError as e:
            self.logger.warning(f"Skipping unserializable cache entry '{cache_key}': {e}")
            return

        try:
            self.redis_client.setex(cache_key, self.ttl_seconds, payload)
        except redis.exceptions.RedisError as e:
            self.logger.warning(f"Redis set failed for '{cache_key}': {e}")
