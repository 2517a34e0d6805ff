"""
Configuration package.

This package contains the configuration source, the Redis options model and
package settings.
"""

from redis_extensions.core.config.configuration import Configuration
from redis_extensions.core.config.redis_options import RedisOptions, validate_options
from redis_extensions.core.config.settings import Settings, get_settings

__all__ = ["Configuration", "RedisOptions", "Settings", "get_settings", "validate_options"]
