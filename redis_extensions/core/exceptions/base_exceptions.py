"""
Base exceptions for the package.

This module defines the foundational exception classes that form the basis of the
package's exception hierarchy.
"""

from typing import Any


class BaseException(Exception):
    """
    Base exception for all package exceptions.

    Attributes:
        message: A human-readable error message
        detail: Additional information about the error
        code: An error code for machine processing
    """

    def __init__(
        self,
        message: str,
        detail: str | list[str] | dict[str, Any] | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message
        self.detail = detail
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} - {self.detail}"
        return self.message


class ArgumentNullError(BaseException, ValueError):
    """
    Raised when a required argument is None.

    Attributes:
        param_name: Name of the offending parameter
    """

    def __init__(self, param_name: str, message: str | None = None) -> None:
        self.param_name = param_name
        super().__init__(
            message=message or f"Value cannot be null. (Parameter '{param_name}')",
            code="ARGUMENT_NULL",
        )


class ValidationException(BaseException):
    """Exception raised for validation errors."""

    def __init__(
        self,
        message: str = "Validation error",
        detail: str | list[str] | dict[str, Any] | None = None,
        code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(message=message, detail=detail, code=code)


class OptionsValidationError(ValidationException):
    """
    Raised when bound options violate their declared constraints.

    Surfaces the first time the options are resolved, never at registration.

    Attributes:
        options_type: The options class that failed validation
        failures: Every failure message, in validator order
    """

    def __init__(self, options_type: type, failures: list[str]) -> None:
        self.options_type = options_type
        self.failures = list(failures)
        super().__init__(
            message="; ".join(self.failures),
            code="OPTIONS_VALIDATION_ERROR",
        )


class ServiceNotRegisteredError(KeyError):
    """Raised when a container has no registration for the requested type."""

    def __init__(self, interface: Any) -> None:
        self.interface = interface
        name = getattr(interface, "__name__", repr(interface))
        super().__init__(f"No implementation registered for {name}")

    def __str__(self) -> str:
        return str(self.args[0])


class ConfigurationError(BaseException):
    """Exception raised when a configuration source cannot be loaded."""

    def __init__(
        self,
        message: str = "Configuration error",
        detail: str | list[str] | dict[str, Any] | None = None,
        code: str = "CONFIGURATION_ERROR",
    ) -> None:
        super().__init__(message=message, detail=detail, code=code)
