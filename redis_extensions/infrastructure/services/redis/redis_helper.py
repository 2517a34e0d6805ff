"""
Redis helper implementation.

This module implements the ``IRedisHelper`` interface on top of the redis-py
asyncio client. The client is built from the resolved ``RedisOptions`` on first
use, so resolving the helper from the container never touches the network.
"""

import logging
from typing import Union

import redis.asyncio as redis_asyncio
from redis.asyncio.client import Redis

from redis_extensions.core.config.redis_options import RedisOptions
from redis_extensions.core.interfaces.services.redis_helper_interface import IRedisHelper
from redis_extensions.core.utils.connection_string import (
    is_url,
    mask_connection_string,
    parse_endpoint,
    with_database,
)
from redis_extensions.infrastructure.di.options import Options

logger = logging.getLogger(__name__)


def create_redis_client(options: RedisOptions) -> Redis:
    """
    Build an asyncio Redis client for the given options.

    ``options.db_number`` always selects the database, overriding any database
    named in a URL connection string.

    Args:
        options: Validated Redis options

    Returns:
        An unconnected Redis client; connections are opened by the pool on demand

    Raises:
        ValueError: If the connection string cannot be parsed
    """
    connection_string = options.connection_string or ""
    if is_url(connection_string):
        return redis_asyncio.from_url(with_database(connection_string, options.db_number))

    endpoint = parse_endpoint(connection_string)
    return Redis(
        host=endpoint.host,
        port=endpoint.port,
        db=options.db_number,
        username=endpoint.username,
        password=endpoint.password,
        ssl=endpoint.ssl,
        socket_connect_timeout=endpoint.connect_timeout,
        socket_timeout=endpoint.socket_timeout,
    )


class RedisHelper(IRedisHelper):
    """
    Concrete implementation of the Redis helper interface.

    Failures from Redis are logged and reported as neutral return values
    (``None``, ``False``, ``0``, empty collections).
    """

    def __init__(self, options: Options[RedisOptions], client: Redis | None = None) -> None:
        """
        Initialize the helper.

        Args:
            options: The registered Redis options; read here, so invalid options
                raise ``OptionsValidationError`` when the helper is resolved
            client: Optional pre-built client, used instead of one built from options
        """
        self._options = options.value
        self._redis = client
        logger.debug(
            "RedisHelper created for %s (db %s)",
            mask_connection_string(self._options.connection_string),
            self._options.db_number,
        )

    @property
    def options(self) -> RedisOptions:
        return self._options

    def _client(self) -> Redis:
        if self._redis is None:
            self._redis = create_redis_client(self._options)
            logger.info(
                "Redis client created for %s (db %s)",
                mask_connection_string(self._options.connection_string),
                self._options.db_number,
            )
        return self._redis

    async def get(self, key: str) -> bytes | None:
        """
        Retrieve a value from Redis by key.

        Returns:
            The stored value, or None if key doesn't exist
        """
        try:
            return await self._client().get(key)
        except Exception as e:
            logger.error(f"Redis get error for key '{key}': {e!s}")
            return None

    async def set(
        self,
        key: str,
        value: Union[str, bytes, int, float],
        ex: int | None = None,
        px: int | None = None,
        nx: bool = False,
        xx: bool = False,
    ) -> bool:
        """
        Set a value in Redis.

        Args:
            key: The key name
            value: The value to set
            ex: Expiration time in seconds
            px: Expiration time in milliseconds
            nx: Only set the key if it does not already exist
            xx: Only set the key if it already exists

        Returns:
            True if successful, False otherwise
        """
        try:
            result = await self._client().set(key, value, ex=ex, px=px, nx=nx, xx=xx)
            return result is not None
        except Exception as e:
            logger.error(f"Redis set error for key '{key}': {e!s}")
            return False

    async def delete(self, *keys: str) -> int:
        """Delete one or more keys and return how many were removed."""
        try:
            if not keys:
                return 0
            return await self._client().delete(*keys)
        except Exception as e:
            logger.error(f"Redis delete error for keys {keys}: {e!s}")
            return 0

    async def exists(self, *keys: str) -> int:
        """Return how many of the given keys exist."""
        try:
            if not keys:
                return 0
            return await self._client().exists(*keys)
        except Exception as e:
            logger.error(f"Redis exists error for keys {keys}: {e!s}")
            return 0

    async def expire(self, key: str, seconds: int) -> bool:
        try:
            return bool(await self._client().expire(key, seconds))
        except Exception as e:
            logger.error(f"Redis expire error for key '{key}': {e!s}")
            return False

    async def ttl(self, key: str) -> int:
        """
        Get the time to live for a key in seconds.

        Returns:
            TTL in seconds, -1 if key exists but has no TTL, -2 if key doesn't exist
        """
        try:
            return await self._client().ttl(key)
        except Exception as e:
            logger.error(f"Redis TTL error for key '{key}': {e!s}")
            return -2

    async def keys(self, pattern: str) -> list[bytes]:
        try:
            return await self._client().keys(pattern)
        except Exception as e:
            logger.error(f"Redis keys error for pattern '{pattern}': {e!s}")
            return []

    async def hget(self, name: str, key: str) -> bytes | None:
        try:
            return await self._client().hget(name, key)
        except Exception as e:
            logger.error(f"Redis hget error for hash '{name}', field '{key}': {e!s}")
            return None

    async def hset(self, name: str, key: str, value: Union[str, bytes, int, float]) -> int:
        """
        Set the value of a hash field.

        Returns:
            1 if field is a new field in the hash and value was set, 0 otherwise
        """
        try:
            return await self._client().hset(name, key, value)
        except Exception as e:
            logger.error(f"Redis hset error for hash '{name}', field '{key}': {e!s}")
            return 0

    async def hdel(self, name: str, *keys: str) -> int:
        try:
            if not keys:
                return 0
            return await self._client().hdel(name, *keys)
        except Exception as e:
            logger.error(f"Redis hdel error for hash '{name}', fields {keys}: {e!s}")
            return 0

    async def hgetall(self, name: str) -> dict[bytes, bytes]:
        try:
            return await self._client().hgetall(name)
        except Exception as e:
            logger.error(f"Redis hgetall error for hash '{name}': {e!s}")
            return {}

    async def incr(self, key: str, amount: int = 1) -> int:
        try:
            return await self._client().incr(key, amount)
        except Exception as e:
            logger.error(f"Redis incr error for key '{key}': {e!s}")
            return 0

    async def ping(self) -> bool:
        """
        Ping the Redis server to check connectivity.

        Returns:
            True if the ping was successful, False otherwise
        """
        try:
            return bool(await self._client().ping())
        except Exception as e:
            logger.error(f"Redis ping error: {e!s}")
            return False

    async def close(self) -> None:
        """Close the Redis connection if one was created."""
        if self._redis is None:
            return
        try:
            await self._redis.aclose()
            logger.debug("Redis connection closed")
        except Exception as e:
            logger.error(f"Redis close error: {e!s}")
        finally:
            self._redis = None
