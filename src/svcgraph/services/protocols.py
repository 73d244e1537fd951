"""Service protocols for dependency injection."""

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from svcgraph.services.lifecycle import Lifetime, ServiceDescriptor, ServiceKey


@runtime_checkable
class ServiceResolver(Protocol):
    """Protocol for objects that resolve services by key.

    ServiceProvider is the standard implementation. Code that only consumes
    services should depend on this protocol so tests can substitute a stub.

    Example:
        ```python
        class StubResolver:
            def __init__(self, services: dict[str, Any]):
                self._services = services

            def resolve(self, key, *args):
                return self._services[key]

            async def resolve_async(self, key, *args):
                return self._services[key]

            def is_available(self, key) -> bool:
                return key in self._services
        ```

    """

    def resolve(self, key: ServiceKey, *args: Any) -> Any:
        """Resolve a service instance, forwarding call-time arguments."""
        ...

    async def resolve_async(self, key: ServiceKey, *args: Any) -> Any:
        """Resolve a service instance, awaiting asynchronous factories."""
        ...

    def is_available(self, key: ServiceKey) -> bool:
        """Check if a service is registered without building it."""
        ...


@runtime_checkable
class ServiceRegistry(Protocol):
    """Protocol for the registration surface handed to setup callbacks.

    ServiceOrchestrator passes a ServiceProviderBuilder, which implements
    this protocol, to the callback given to setup().
    """

    def register_instance(
        self, key: ServiceKey, instance: Any, lifetime: Lifetime | None = None
    ) -> None: ...

    def register(
        self, descriptor: ServiceDescriptor, lifetime: Lifetime | None = None
    ) -> None: ...

    def register_factory(
        self,
        factory: Callable[..., Any],
        inject: Sequence[ServiceKey],
        key: ServiceKey,
        lifetime: Lifetime | None = None,
    ) -> None: ...

    def register_async_factory(
        self,
        factory: Callable[..., Awaitable[Any]],
        inject: Sequence[ServiceKey],
        key: ServiceKey,
        lifetime: Lifetime | None = None,
    ) -> None: ...

    def get_dependency_graph(self) -> dict[str, list[str]]: ...
