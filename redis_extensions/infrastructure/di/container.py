"""
Dependency Injection Container.

This module implements the service container that registration extensions such
as ``add_redis`` write into. The container holds a registration table keyed by
interface type, resolves services lazily, and caches singletons for the life of
the container.
"""

import inspect
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

from redis_extensions.core.exceptions import ServiceNotRegisteredError
from redis_extensions.infrastructure.di.options import Options, OptionsBuilder

logger = logging.getLogger(__name__)

# Global container instance
_container = None

# Generic type variable for interfaces
T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class ServiceRegistration:
    """One entry of the registration table."""

    interface: Any
    lifetime: str
    target: Any


class DIContainer:
    """
    Dependency Injection Container for managing services.

    Registrations are appended at startup; resolution happens on first use.
    Re-registering an interface replaces the earlier registration.
    """

    INSTANCE = "instance"
    SINGLETON = "singleton"
    FACTORY = "factory"

    def __init__(self) -> None:
        """Initialize an empty container."""
        self._registrations: dict[Any, ServiceRegistration] = {}
        self._services: dict[Any, Any] = {}
        self._options: dict[type, Options[Any]] = {}
        self._lock = threading.RLock()
        logger.debug("Initialized DI container")

    def _add_registration(self, interface: Any, lifetime: str, target: Any) -> None:
        with self._lock:
            if interface in self._registrations:
                logger.debug("Replacing registration for %s", _name(interface))
            self._registrations.pop(interface, None)
            self._services.pop(interface, None)
            self._registrations[interface] = ServiceRegistration(interface, lifetime, target)

    def register(self, interface: type[T], implementation: T) -> None:
        """
        Register an implementation instance for an interface.

        Args:
            interface: The interface type to register
            implementation: The implementation instance
        """
        self._add_registration(interface, self.INSTANCE, implementation)
        self._services[interface] = implementation
        logger.debug("Registered %s instance in DI container.", _name(interface))

    def register_instance(self, interface: type[T], instance: T) -> None:
        """
        Register a specific instance for an interface.

        This is an alias for register() to maintain a consistent naming convention.
        """
        self.register(interface, instance)

    def register_singleton(self, interface: type[T], implementation_type: type[T]) -> None:
        """
        Register a singleton implementation for an interface.

        The type is instantiated once, when first requested. Constructor
        parameters are injected from the container by their type annotations.

        Args:
            interface: The interface type to register
            implementation_type: The implementation type
        """
        self._add_registration(interface, self.SINGLETON, implementation_type)
        logger.debug(
            "Registered %s as singleton %s in DI container.",
            implementation_type.__name__,
            _name(interface),
        )

    def register_factory(self, interface: type[T], factory: Callable[["DIContainer"], T]) -> None:
        """
        Register a factory function for creating the service instance.

        The factory receives the container and runs once; its result is cached.

        Args:
            interface: The interface type
            factory: Factory function that creates an instance of the interface
        """
        self._add_registration(interface, self.FACTORY, factory)
        logger.debug("Registered %s factory in DI container.", _name(interface))

    def add_options(self, options_type: type[T]) -> OptionsBuilder[T]:
        """
        Register (or extend) the options entry for ``options_type``.

        Returns:
            A builder for attaching configure steps and validators
        """
        with self._lock:
            options = self._options.get(options_type)
            if options is None:
                options = Options(options_type)
                self._options[options_type] = options
                self._add_registration(Options[options_type], self.INSTANCE, options)
                self._services[Options[options_type]] = options
                logger.debug("Registered options for %s", options_type.__name__)
        return OptionsBuilder(options)

    def configure(self, options_type: type[T], action: Callable[[T], None]) -> "DIContainer":
        """Shorthand for ``add_options(options_type).configure(action)``."""
        self.add_options(options_type).configure(action)
        return self

    def get_options(self, options_type: type[T]) -> Options[T]:
        """
        Return the options holder for ``options_type``.

        Raises:
            ServiceNotRegisteredError: If no options were registered for the type
        """
        options = self._options.get(options_type)
        if options is None:
            raise ServiceNotRegisteredError(Options[options_type])
        return options

    def is_registered(self, interface: Any) -> bool:
        return interface in self._registrations

    @property
    def registrations(self) -> list[ServiceRegistration]:
        """Snapshot of the registration table in registration order."""
        return list(self._registrations.values())

    def get(self, interface: type[T]) -> T:
        """
        Resolve an implementation for the specified interface.

        Args:
            interface: The interface type to resolve

        Returns:
            An instance implementing the interface

        Raises:
            ServiceNotRegisteredError: If no implementation is registered for the interface
        """
        # Fast path for instances and already created singletons
        if interface in self._services:
            return self._services[interface]

        registration = self._registrations.get(interface)
        if registration is None:
            raise ServiceNotRegisteredError(interface)

        with self._lock:
            if interface in self._services:
                return self._services[interface]

            if registration.lifetime == self.SINGLETON:
                instance = self._activate(registration.target)
            else:
                instance = registration.target(self)

            # Cache the instance for future requests
            self._services[interface] = instance
            logger.info("Created %s for %s", type(instance).__name__, _name(interface))
            return instance

    def _activate(self, implementation_type: type[T]) -> T:
        hints = get_type_hints(implementation_type.__init__)
        kwargs: dict[str, Any] = {}
        for name, parameter in inspect.signature(implementation_type).parameters.items():
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            annotation = hints.get(name)
            dependency = self._resolve_dependency(annotation)
            if dependency is _MISSING:
                if parameter.default is parameter.empty:
                    raise ServiceNotRegisteredError(annotation if annotation is not None else name)
                continue
            kwargs[name] = dependency
        return implementation_type(**kwargs)

    def _resolve_dependency(self, annotation: Any) -> Any:
        if annotation is None:
            return _MISSING
        if get_origin(annotation) is Options:
            (options_type,) = get_args(annotation)
            options = self._options.get(options_type)
            return options if options is not None else _MISSING
        if annotation in self._registrations:
            return self.get(annotation)
        return _MISSING


def _name(interface: Any) -> str:
    return getattr(interface, "__name__", repr(interface))


def get_container() -> DIContainer:
    """
    Get the global DI container instance.

    Only one default container exists for the process; it starts empty and is
    filled by registration extensions.

    Returns:
        The global DI container instance
    """
    global _container

    if _container is None:
        _container = DIContainer()

    return _container


def reset_container() -> None:
    """
    Reset the global DI container instance.

    This function is useful for testing when we need to reset
    the container between tests.
    """
    global _container
    _container = None


def get_service(interface_type: type[T]) -> T:
    """
    Get a service instance by its interface type from the global container.

    Args:
        interface_type: The interface type to resolve

    Returns:
        An instance implementing the interface
    """
    container = get_container()
    return container.get(interface_type)
