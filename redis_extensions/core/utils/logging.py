"""
Logging Utility Module.

This module provides logging utilities for the package, with care taken to keep
Redis credentials out of log output.
"""

import logging

from redis_extensions.core.utils.connection_string import mask_connection_string


class ConnectionStringSanitizingFilter(logging.Filter):
    """Custom logging filter that redacts passwords in Redis connection strings."""

    def __init__(self, name: str = "ConnectionStringSanitizer"):
        super().__init__(name)

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize the fully formatted log message."""
        original_message = record.getMessage()
        sanitized_message = mask_connection_string(original_message)

        if sanitized_message != original_message:
            # Args are baked into the sanitized message
            record.msg = sanitized_message
            record.args = ()

        return True

