"""
Redis options model.

Holds the connection settings bound from configuration (``ConnectionString`` and
``DbNumber`` keys) or set by a configure callback. Constraints are declared on
the fields and only checked when the options subsystem activates the options,
never at construction.
"""

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import AfterValidator, ValidationError, ValidatorFunctionWrapHandler, WrapValidator
from pydantic_core import PydanticCustomError

from redis_extensions.core.utils.validation import annotation_failures

CONNECTION_STRING_REQUIRED = "redis connection string is required"
DB_NUMBER_OUT_OF_RANGE = "redis db number must be between 0 and 15"

MIN_DB_NUMBER = 0
MAX_DB_NUMBER = 15


def _require_connection_string(value: str | None) -> str | None:
    if value is None or not value.strip():
        raise PydanticCustomError("required", CONNECTION_STRING_REQUIRED)
    return value


def _check_db_number_range(value: int) -> int:
    if not MIN_DB_NUMBER <= value <= MAX_DB_NUMBER:
        raise PydanticCustomError("range", DB_NUMBER_OUT_OF_RANGE)
    return value


def _db_number_or_range_error(value: Any, handler: ValidatorFunctionWrapHandler) -> int:
    # A value that is not an integer at all is reported as out of range
    try:
        return handler(value)
    except ValidationError:
        raise PydanticCustomError("range", DB_NUMBER_OUT_OF_RANGE) from None


@dataclass
class RedisOptions:
    """
    Redis connection configuration.

    Construct with no arguments for binding, or pass both values directly:
    ``RedisOptions("redis://localhost:6379", 3)``.

    Attributes:
        connection_string: Redis URL or ``host:port[,key=value...]`` endpoint string
        db_number: Logical database index, 0 through 15
    """

    connection_string: Annotated[str | None, AfterValidator(_require_connection_string)] = None
    db_number: Annotated[
        int, AfterValidator(_check_db_number_range), WrapValidator(_db_number_or_range_error)
    ] = 0


def validate_options(options: RedisOptions) -> list[str]:
    """
    Check options against the constraints declared on their fields.

    Args:
        options: The options instance to check

    Returns:
        Failure messages in field order; empty when the options are valid
    """
    return annotation_failures(options)
