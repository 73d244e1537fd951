"""Error classes for svcgraph.

This module provides:
- ServiceGraphError: Base exception class for all container errors
- DuplicateRegistrationError, BuilderClosedError: Registration-time exceptions
- MissingDependencyError, CircularDependencyError: Graph validation exceptions
- ServiceNotRegisteredError, ServiceTypeMissingError, AsyncDependencyError:
  Resolution exceptions
- NotConfiguredError: Orchestrator exception
"""

from collections.abc import Sequence


class ServiceGraphError(Exception):
    """Base exception for all svcgraph errors."""

    pass


class DuplicateRegistrationError(ServiceGraphError):
    """Raised when a service key is registered more than once."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Service {key} already registered")


class BuilderClosedError(ServiceGraphError):
    """Raised when a builder is used after build() has been called."""

    pass


class MissingDependencyError(ServiceGraphError):
    """Raised when a declared dependency has no registered service."""

    def __init__(self, service: str, dependency: str) -> None:
        self.service = service
        self.dependency = dependency
        super().__init__(
            f"Service {service} depends on {dependency}, but {dependency} is not registered"
        )


class CircularDependencyError(ServiceGraphError):
    """Raised when a dependency chain revisits a service on the current path."""

    def __init__(self, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__(f"Circular dependency detected: {' -> '.join(self.path)}")


class ServiceNotRegisteredError(ServiceGraphError, LookupError):
    """Raised when resolving a key the provider does not know."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Service {key} not registered")


class ServiceTypeMissingError(ServiceGraphError):
    """Raised when a node reaches instantiation without a target or instance.

    This signals an inconsistent graph rather than a caller input error.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Service type not found for service {key}")


class AsyncDependencyError(ServiceGraphError):
    """Raised when a synchronous build reaches an async factory with no cached instance."""

    def __init__(self, service: str, dependency: str) -> None:
        self.service = service
        self.dependency = dependency
        super().__init__(
            f"Service {service} depends on async service {dependency}; "
            "resolve it with resolve_async()"
        )


class NotConfiguredError(ServiceGraphError):
    """Raised when a provider is requested before the orchestrator is set up."""

    pass
