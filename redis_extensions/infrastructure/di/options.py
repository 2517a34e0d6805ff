"""
Options subsystem.

An ``Options[T]`` holder collects configure steps and validators for one options
type and materialises the value lazily: the first access to ``value`` builds
``T()``, applies every configure step in registration order, then runs every
validator. The outcome is cached, so validation runs exactly once per holder.
"""

import dataclasses
import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from redis_extensions.core.config.configuration import Configuration
from redis_extensions.core.exceptions import ArgumentNullError, OptionsValidationError
from redis_extensions.core.utils.validation import annotation_failures, convert_field_value

logger = logging.getLogger(__name__)

T = TypeVar("T")

Validator = Callable[[Any], list[str]]


def _normalize(key: str) -> str:
    return key.replace("_", "").lower()


def _bindable_fields(instance: Any) -> list[str]:
    if dataclasses.is_dataclass(instance):
        return [field.name for field in dataclasses.fields(instance)]
    return [name for name in vars(instance) if not name.startswith("_")]


def bind_configuration(instance: Any, configuration: Mapping[str, Any]) -> None:
    """
    Copy matching configuration keys onto an options instance.

    Keys match field names case-insensitively and ignoring underscores, so
    ``ConnectionString``, ``connection_string`` and ``CONNECTIONSTRING`` all bind
    to ``connection_string``. Nested sections are not bound to scalar fields.
    """
    lookup = {_normalize(key): key for key in configuration}
    for field_name in _bindable_fields(instance):
        key = lookup.get(_normalize(field_name))
        if key is None:
            continue
        raw = configuration[key]
        if isinstance(raw, Mapping):
            logger.debug("Skipping section %r for scalar field %s", key, field_name)
            continue
        setattr(instance, field_name, convert_field_value(type(instance), field_name, raw))


class Options(Generic[T]):
    """
    Lazily materialised options for a single options type.

    Attributes:
        options_type: The options class this holder builds
    """

    def __init__(self, options_type: type[T]) -> None:
        self.options_type = options_type
        self._configure_actions: list[Callable[[T], None]] = []
        self._validators: list[Validator] = []
        self._lock = threading.Lock()
        self._materialized = False
        self._value: T | None = None
        self._error: OptionsValidationError | None = None

    def add_configure_action(self, action: Callable[[T], None]) -> None:
        if self._materialized:
            logger.warning(
                "Options for %s were already resolved; new configure step will not apply",
                self.options_type.__name__,
            )
        self._configure_actions.append(action)

    def add_validator(self, validator: Validator) -> None:
        if self._materialized:
            logger.warning(
                "Options for %s were already resolved; new validator will not run",
                self.options_type.__name__,
            )
        self._validators.append(validator)

    @property
    def is_materialized(self) -> bool:
        return self._materialized

    @property
    def value(self) -> T:
        """
        The configured and validated options instance.

        Raises:
            OptionsValidationError: If any validator reported a failure
        """
        if not self._materialized:
            with self._lock:
                if not self._materialized:
                    self._materialize()

        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    def _materialize(self) -> None:
        instance = self.options_type()
        for action in self._configure_actions:
            action(instance)

        failures: list[str] = []
        for validator in self._validators:
            failures.extend(validator(instance))

        if failures:
            self._error = OptionsValidationError(self.options_type, failures)
            logger.warning(
                "Validation failed for %s: %s", self.options_type.__name__, "; ".join(failures)
            )
        else:
            self._value = instance
            logger.debug("Resolved options for %s", self.options_type.__name__)

        self._materialized = True


class OptionsBuilder(Generic[T]):
    """Fluent registration of configure steps and validators for an options type."""

    def __init__(self, options: Options[T]) -> None:
        self._options = options

    @property
    def options(self) -> Options[T]:
        return self._options

    def configure(self, action: Callable[[T], None]) -> "OptionsBuilder[T]":
        """Append a callback that mutates the options instance."""
        if action is None:
            raise ArgumentNullError("action")
        self._options.add_configure_action(action)
        return self

    def bind(self, configuration: Mapping[str, Any]) -> "OptionsBuilder[T]":
        """Append a step that copies matching keys from ``configuration``."""
        if configuration is None:
            raise ArgumentNullError("configuration")
        if not isinstance(configuration, Configuration):
            configuration = Configuration(configuration)
        self._options.add_configure_action(
            lambda instance: bind_configuration(instance, configuration)
        )
        return self

    def validate(self, predicate: Callable[[T], bool], message: str) -> "OptionsBuilder[T]":
        """Append a custom rule; ``message`` is reported when ``predicate`` is False."""
        if predicate is None:
            raise ArgumentNullError("predicate")
        self._options.add_validator(lambda instance: [] if predicate(instance) else [message])
        return self

    def validate_data_annotations(self) -> "OptionsBuilder[T]":
        """Append the constraints declared on the options fields."""
        self._options.add_validator(annotation_failures)
        return self
