"""
Dependency injection package.

Service container and options subsystem. The Redis registration extensions live
in ``redis_extensions.infrastructure.di.redis_registration``.
"""

from redis_extensions.infrastructure.di.container import (
    DIContainer,
    get_container,
    get_service,
    reset_container,
)
from redis_extensions.infrastructure.di.options import Options, OptionsBuilder

__all__ = [
    "DIContainer",
    "Options",
    "OptionsBuilder",
    "get_container",
    "get_service",
    "reset_container",
]
