"""
Interface for the Redis helper registered by ``add_redis``.

Application code depends on this abstraction and resolves it from the service
container, never on the concrete client wrapper.
"""

from abc import ABC, abstractmethod


class IRedisHelper(ABC):
    """Interface for Redis operations.

    Implementations delegate to a Redis client and report failures as neutral
    return values rather than raising.
    """

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """Get a value from Redis.

        Args:
            key: The key to retrieve

        Returns:
            Optional[bytes]: Value if found, None otherwise
        """
        pass

    @abstractmethod
    async def set(
        self,
        key: str,
        value: str | bytes | int | float,
        ex: int | None = None,
        px: int | None = None,
        nx: bool = False,
        xx: bool = False,
    ) -> bool:
        """Set a key in Redis with optional expiration.

        Args:
            key: Key to set
            value: Value to set
            ex: Expiration in seconds
            px: Expiration in milliseconds
            nx: Only set if key does not exist
            xx: Only set if key exists

        Returns:
            bool: True if operation was successful
        """
        pass

    @abstractmethod
    async def delete(self, *keys: str) -> int:
        """Delete one or more keys.

        Returns:
            int: Number of keys deleted
        """
        pass

    @abstractmethod
    async def exists(self, *keys: str) -> int:
        """Check if one or more keys exist.

        Returns:
            int: Number of keys that exist
        """
        pass

    @abstractmethod
    async def expire(self, key: str, seconds: int) -> bool:
        """Set expiration on a key."""
        pass

    @abstractmethod
    async def ttl(self, key: str) -> int:
        """Get time to live for a key.

        Returns:
            int: TTL in seconds, -1 if no expiry, -2 if key doesn't exist
        """
        pass

    @abstractmethod
    async def keys(self, pattern: str) -> list[bytes]:
        """Get keys matching a pattern such as ``"user:*"``."""
        pass

    @abstractmethod
    async def hget(self, name: str, key: str) -> bytes | None:
        """Get a value from a hash."""
        pass

    @abstractmethod
    async def hset(self, name: str, key: str, value: str | bytes | int | float) -> int:
        """Set a key in a hash.

        Returns:
            int: 1 if field was new, 0 if field was updated
        """
        pass

    @abstractmethod
    async def hdel(self, name: str, *keys: str) -> int:
        """Delete keys from a hash."""
        pass

    @abstractmethod
    async def hgetall(self, name: str) -> dict[bytes, bytes]:
        """Get all fields and values from a hash."""
        pass

    @abstractmethod
    async def incr(self, key: str, amount: int = 1) -> int:
        """Increment a key by an amount and return the new value."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check connectivity; False when the server cannot be reached."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying client."""
        pass
