"""
Cache Layer - Redis caching implementations.

Contains the async Redis client factory and the CacheService variants.
"""

from messaging.infrastructure.cache.noop_cache_service import NoOpCacheService
from messaging.infrastructure.cache.redis_cache_service import RedisCacheService
from messaging.infrastructure.cache.redis_client import (
    close_redis_client,
    create_redis_client,
)

__all__ = [
    "create_redis_client",
    "close_redis_client",
    "RedisCacheService",
    "NoOpCacheService",
]
