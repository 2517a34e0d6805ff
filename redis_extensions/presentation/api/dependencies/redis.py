"""
Redis Helper Dependency Provider

This module provides FastAPI dependency injection for the Redis helper, so
route handlers depend on the ``IRedisHelper`` abstraction rather than a concrete
client.
"""

from fastapi import Request

from redis_extensions.core.interfaces.services.redis_helper_interface import IRedisHelper
from redis_extensions.infrastructure.di.container import get_container


def get_redis_helper(request: Request) -> IRedisHelper:
    """
    Dependency provider for the Redis helper.

    Resolves the helper from the container stored on ``app.state.container``,
    falling back to the process-wide container.

    Args:
        request: The FastAPI request object containing application state

    Returns:
        The registered IRedisHelper singleton
    """
    container = getattr(request.app.state, "container", None) or get_container()
    return container.get(IRedisHelper)
