"""
Global test configuration for the test suite.

Fixtures here are available to all tests and never talk to a real Redis server.
"""

import logging
from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest

from redis_extensions.core.config.configuration import Configuration
from redis_extensions.infrastructure.di.container import DIContainer, reset_container

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


@pytest.fixture
def services() -> DIContainer:
    """A fresh, empty service container."""
    return DIContainer()


@pytest.fixture(autouse=True)
def _reset_global_container() -> Generator[None, None, None]:
    """Keep the process-wide container isolated between tests."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def redis_configuration() -> Configuration:
    """Application configuration with a valid Redis section."""
    return Configuration(
        {
            "Logging": {"LogLevel": {"Default": "Information"}},
            "Redis": {
                "ConnectionString": "redis://localhost:6379",
                "DbNumber": 3,
            },
        }
    )


@pytest.fixture
def mock_redis_client() -> AsyncMock:
    """Create a mock redis-py client for testing."""
    client = AsyncMock()
    client.get = AsyncMock(return_value=b"value")
    client.set = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=1)
    client.exists = AsyncMock(return_value=1)
    client.expire = AsyncMock(return_value=True)
    client.ttl = AsyncMock(return_value=3600)
    client.keys = AsyncMock(return_value=[b"user:1"])
    client.hget = AsyncMock(return_value=b"field-value")
    client.hset = AsyncMock(return_value=1)
    client.hdel = AsyncMock(return_value=1)
    client.hgetall = AsyncMock(return_value={b"field": b"value"})
    client.incr = AsyncMock(return_value=2)
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock(return_value=None)
    return client
