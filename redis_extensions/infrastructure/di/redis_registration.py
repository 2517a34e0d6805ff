"""
Redis registration extensions.

Wires ``RedisOptions`` and the ``IRedisHelper`` singleton into a ``DIContainer``.
Registration only appends to the container's registration table: options are
bound and validated, and the helper is constructed, on first resolution.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from redis_extensions.core.config.redis_options import RedisOptions
from redis_extensions.core.exceptions import ArgumentNullError
from redis_extensions.core.interfaces.services.redis_helper_interface import IRedisHelper
from redis_extensions.infrastructure.di.container import DIContainer
from redis_extensions.infrastructure.services.redis.redis_helper import RedisHelper

logger = logging.getLogger(__name__)

ConfigureRedisOptions = Callable[[RedisOptions], None]


def add_redis_from_configuration(
    services: DIContainer, configuration: Mapping[str, Any]
) -> DIContainer:
    """
    Register Redis options bound from configuration, plus the Redis helper.

    The ``ConnectionString`` and ``DbNumber`` keys of ``configuration`` are bound
    and the field constraints are checked when the options are first resolved.

    Args:
        services: The container to register into
        configuration: The configuration section holding the Redis keys

    Returns:
        The same container, for chaining

    Raises:
        ArgumentNullError: If either argument is None
    """
    if services is None:
        raise ArgumentNullError("services")

    if configuration is None:
        raise ArgumentNullError("configuration")

    services.add_options(RedisOptions).bind(configuration).validate_data_annotations()

    services.register_singleton(IRedisHelper, RedisHelper)
    logger.info("Registered Redis helper bound from configuration")
    return services


def add_redis_from_callback(
    services: DIContainer,
    configure_options: ConfigureRedisOptions,
    *,
    validate: bool = False,
) -> DIContainer:
    """
    Register Redis options set by a callback, plus the Redis helper.

    Field constraints are not checked unless ``validate`` is True.

    Args:
        services: The container to register into
        configure_options: Callback that mutates the options instance
        validate: Also check the declared field constraints on first resolution

    Returns:
        The same container, for chaining

    Raises:
        ArgumentNullError: If either argument is None
    """
    if services is None:
        raise ArgumentNullError("services")

    if configure_options is None:
        raise ArgumentNullError("configure_options")

    builder = services.add_options(RedisOptions).configure(configure_options)
    if validate:
        builder.validate_data_annotations()

    services.register_singleton(IRedisHelper, RedisHelper)
    logger.info("Registered Redis helper configured by callback")
    return services


def add_redis(
    services: DIContainer,
    source: Mapping[str, Any] | ConfigureRedisOptions,
) -> DIContainer:
    """
    Register the Redis helper from either a configuration section or a callback.

    Callables are treated as configure callbacks; anything else is bound as
    configuration.
    """
    if callable(source) and not isinstance(source, Mapping):
        return add_redis_from_callback(services, source)
    return add_redis_from_configuration(services, source)
