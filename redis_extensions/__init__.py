"""
Redis dependency-injection extensions.

Registers a Redis helper into a service container, with options bound from a
configuration section or set by a callback::

    services = DIContainer()
    add_redis(services, configuration.get_section("Redis"))
    helper = services.get(IRedisHelper)
"""

from redis_extensions.core.config import Configuration, RedisOptions, Settings, get_settings
from redis_extensions.core.exceptions import (
    ArgumentNullError,
    OptionsValidationError,
    ServiceNotRegisteredError,
)
from redis_extensions.core.interfaces.services import IRedisHelper
from redis_extensions.infrastructure.di import (
    DIContainer,
    Options,
    OptionsBuilder,
    get_container,
    get_service,
    reset_container,
)
from redis_extensions.infrastructure.di.redis_registration import (
    add_redis,
    add_redis_from_callback,
    add_redis_from_configuration,
)
from redis_extensions.infrastructure.services.redis import RedisHelper

__version__ = "0.1.0"

__all__ = [
    "ArgumentNullError",
    "Configuration",
    "DIContainer",
    "IRedisHelper",
    "Options",
    "OptionsBuilder",
    "OptionsValidationError",
    "RedisHelper",
    "RedisOptions",
    "ServiceNotRegisteredError",
    "Settings",
    "add_redis",
    "add_redis_from_callback",
    "add_redis_from_configuration",
    "get_container",
    "get_service",
    "get_settings",
    "reset_container",
]
