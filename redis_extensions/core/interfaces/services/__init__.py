"""
Core service interfaces package.

These interfaces define contracts that concrete implementations must fulfill,
so application code depends on abstractions rather than concrete clients.
"""

from redis_extensions.core.interfaces.services.redis_helper_interface import IRedisHelper

__all__ = ["IRedisHelper"]
