"""Read-only service provider produced by the builder."""

import logging
from collections.abc import Mapping
from typing import Any

from svcgraph.errors import ServiceNotRegisteredError
from svcgraph.services.factory import ServiceFactory
from svcgraph.services.lifecycle import ServiceDescriptor, ServiceKey, get_key_name

logger = logging.getLogger(__name__)


class ServiceProvider:
    """Resolves services by key from a built dependency graph.

    Each key maps to a ServiceFactory rather than an instance, so services
    are created lazily on first resolution.

    Example:
        ```python
        provider = builder.build()
        repository = provider.resolve("repository")

        async def main():
            client = await provider.resolve_async("http_client", 5.0)
        ```

    """

    def __init__(self, factories: Mapping[str, ServiceFactory]) -> None:
        """Initialise the provider.

        Args:
            factories: Service key to factory mapping, copied on construction

        """
        self._factories: dict[str, ServiceFactory] = dict(factories)
        logger.debug("ServiceProvider initialized with %d services", len(self._factories))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, ServiceDescriptor)):
            return False
        return self.is_available(key)

    def __len__(self) -> int:
        return len(self._factories)

    def is_available(self, key: ServiceKey) -> bool:
        """Check whether a service is registered, without building it."""
        return get_key_name(key) in self._factories

    def resolve(self, key: ServiceKey, *args: Any) -> Any:
        """Resolve a service instance.

        Args:
            key: Service key or descriptor
            *args: Extra call-time arguments forwarded to the constructor or
                factory after the injected dependencies

        Returns:
            Service instance. Services registered with an async factory
            return an awaitable; use resolve_async() for those.

        Raises:
            ServiceNotRegisteredError: If no service is registered under key
            AsyncDependencyError: If the service depends on an async factory
                that has not been resolved with resolve_async() yet

        """
        return self._get_factory(key).build(*args)

    async def resolve_async(self, key: ServiceKey, *args: Any) -> Any:
        """Resolve a service instance, awaiting asynchronous factories.

        Raises:
            ServiceNotRegisteredError: If no service is registered under key

        """
        factory = self._get_factory(key)
        return await factory.build_async(*args)

    def resolve_named(self, name: str, *args: Any) -> Any:
        """Resolve a service registered under a plain string name."""
        if not isinstance(name, str):
            raise TypeError(f"Service name must be a str, got {type(name).__name__}")
        return self.resolve(name, *args)

    def resolve_factory(self, key: ServiceKey, *args: Any) -> Any:
        """Resolve a factory-registered service with call-time arguments."""
        return self.resolve(key, *args)

    async def resolve_factory_async(self, key: ServiceKey, *args: Any) -> Any:
        """Resolve an async factory-registered service with call-time arguments."""
        return await self.resolve_async(key, *args)

    def _get_factory(self, key: ServiceKey) -> ServiceFactory:
        name = get_key_name(key)
        factory = self._factories.get(name)
        if factory is None:
            logger.error("Service %s not registered", name)
            raise ServiceNotRegisteredError(name)
        return factory
