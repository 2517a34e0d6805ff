"""
Core exceptions package.

This package contains all exceptions raised by the package.
"""

from redis_extensions.core.exceptions.base_exceptions import (
    ArgumentNullError,
    BaseException,
    ConfigurationError,
    OptionsValidationError,
    ServiceNotRegisteredError,
    ValidationException,
)

__all__ = [
    "ArgumentNullError",
    "BaseException",
    "ConfigurationError",
    "OptionsValidationError",
    "ServiceNotRegisteredError",
    "ValidationException",
]
