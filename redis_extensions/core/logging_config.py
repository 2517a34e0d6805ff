"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the package.
Every handler runs the connection string sanitizer so Redis passwords never reach
log output in plain text.
"""

import logging
import logging.config
from typing import Any

from redis_extensions.core.config.settings import get_settings

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_REDIS_LOG_LEVEL = "WARNING"

LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "detailed": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "filters": {
        "connection_string_sanitizer": {
            "()": "redis_extensions.core.utils.logging.ConnectionStringSanitizingFilter",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": DEFAULT_LOG_LEVEL,
            "formatter": "standard",
            "filters": ["connection_string_sanitizer"],
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "redis_extensions": {
            "level": DEFAULT_LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
        "redis": {
            "level": DEFAULT_REDIS_LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
    },
}
LOGGING_CONFIG = LOGGING_CONFIG_BASE.copy()


def build_logging_config(
    level: str | None = None, redis_level: str | None = None
) -> dict[str, Any]:
    """
    Return a copy of the logging configuration at the requested levels.

    Args:
        level: Package log level; defaults to ``Settings.LOG_LEVEL``
        redis_level: redis-py log level; defaults to ``Settings.REDIS_LOG_LEVEL``
    """
    if level is None or redis_level is None:
        settings = get_settings()
        level = level or settings.LOG_LEVEL
        redis_level = redis_level or settings.REDIS_LOG_LEVEL
    level = level.upper()
    config = {
        **LOGGING_CONFIG_BASE,
        "handlers": {
            name: {**handler, "level": level}
            for name, handler in LOGGING_CONFIG_BASE["handlers"].items()
        },
        "loggers": {**LOGGING_CONFIG_BASE["loggers"]},
    }
    config["loggers"]["redis_extensions"] = {
        **LOGGING_CONFIG_BASE["loggers"]["redis_extensions"],
        "level": level,
    }
    config["loggers"]["redis"] = {
        **LOGGING_CONFIG_BASE["loggers"]["redis"],
        "level": redis_level.upper(),
    }
    return config


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """
    Configure the logging system with the provided configuration or default.

    Args:
        config: Optional logging configuration dictionary; defaults to one built
            from the current settings
    """
    if config is None:
        config = build_logging_config()

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured successfully")
