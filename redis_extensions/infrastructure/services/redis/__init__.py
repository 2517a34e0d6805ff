"""
Redis service implementations package.

This package contains the Redis helper adhering to the interface defined in the
core layer.
"""

from redis_extensions.infrastructure.services.redis.redis_helper import (
    RedisHelper,
    create_redis_client,
)

__all__ = ["RedisHelper", "create_redis_client"]
