"""Builder for validating service dependency graphs.

ServiceProviderBuilder accumulates service registrations, validates the
resulting dependency graph and emits a ServiceProvider.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from svcgraph.dag import DependencyGraph
from svcgraph.errors import (
    BuilderClosedError,
    DuplicateRegistrationError,
    ServiceGraphError,
)
from svcgraph.services.configuration import BuilderConfiguration
from svcgraph.services.factory import ServiceFactory
from svcgraph.services.lifecycle import (
    Lifetime,
    ServiceDescriptor,
    ServiceKey,
    get_key_name,
    get_key_names,
)
from svcgraph.services.node import DependencyNode, NodeKind
from svcgraph.services.provider import ServiceProvider

logger = logging.getLogger(__name__)


class ServiceProviderBuilder:
    """Registers services and builds a validated ServiceProvider.

    A builder is single-use: once build() has been called, whether it
    succeeded or not, further registrations and builds raise
    BuilderClosedError.

    Example:
        >>> builder = ServiceProviderBuilder()
        >>> builder.register_instance("greeting", "Hello")
        >>> builder.register_factory(lambda greeting, name: f"{greeting} {name}",
        ...                          ["greeting"], "greeter", Lifetime.TRANSIENT)
        >>> provider = builder.build()
        >>> provider.resolve("greeter", "World")
        'Hello World'

    """

    def __init__(self, configuration: BuilderConfiguration | None = None) -> None:
        """Initialise the builder.

        Args:
            configuration: Defaults applied to registrations; uses
                BuilderConfiguration() when omitted.

        """
        if configuration is None:
            configuration = BuilderConfiguration()
        self._configuration = configuration
        self._nodes: dict[str, DependencyNode] = {}
        self._closed = False

    @property
    def configuration(self) -> BuilderConfiguration:
        return self._configuration

    @property
    def registered_keys(self) -> list[str]:
        """Registered service keys in registration order."""
        return list(self._nodes)

    def is_registered(self, key: ServiceKey) -> bool:
        return get_key_name(key) in self._nodes

    def register_instance(
        self, key: ServiceKey, instance: Any, lifetime: Lifetime | None = None
    ) -> None:
        """Register a pre-built instance with no dependencies.

        Args:
            key: Service key or descriptor
            instance: The service instance, returned as-is on every resolution
            lifetime: Recorded lifetime; instances are always reused

        Raises:
            DuplicateRegistrationError: If key is already registered

        """
        name = get_key_name(key)
        self._add(
            DependencyNode.for_instance(name, instance, self._lifetime(lifetime))
        )

    def register(
        self, descriptor: ServiceDescriptor, lifetime: Lifetime | None = None
    ) -> None:
        """Register a service built by calling the descriptor's implementation.

        The implementation is called with the descriptor's dependencies, in
        declared order, followed by any call-time arguments.

        Raises:
            DuplicateRegistrationError: If the descriptor key is already registered

        """
        if not isinstance(descriptor, ServiceDescriptor):
            raise TypeError(
                f"register() expects a ServiceDescriptor, got {type(descriptor).__name__}"
            )
        self._add(
            DependencyNode(
                key=descriptor.key,
                kind=NodeKind.CONSTRUCTOR,
                dependencies=get_key_names(descriptor.dependencies),
                target=descriptor.implementation,
                lifetime=self._lifetime(lifetime),
            )
        )

    def register_factory(
        self,
        factory: Callable[..., Any],
        inject: Sequence[ServiceKey],
        key: ServiceKey,
        lifetime: Lifetime | None = None,
    ) -> None:
        """Register a factory function that builds a service instance.

        Args:
            factory: Called with the resolved dependencies followed by any
                call-time arguments
            inject: Dependencies required by the factory, in argument order
            key: Unique key for the service
            lifetime: Service lifetime; defaults to the configured lifetime

        Raises:
            DuplicateRegistrationError: If key is already registered

        """
        self._add_factory(NodeKind.FACTORY, factory, inject, key, lifetime)

    def register_async_factory(
        self,
        factory: Callable[..., Awaitable[Any]],
        inject: Sequence[ServiceKey],
        key: ServiceKey,
        lifetime: Lifetime | None = None,
    ) -> None:
        """Register an asynchronous factory function that builds a service instance.

        Services registered this way are resolved with
        ServiceProvider.resolve_async().

        Raises:
            DuplicateRegistrationError: If key is already registered

        """
        self._add_factory(NodeKind.ASYNC_FACTORY, factory, inject, key, lifetime)

    def get_dependency_graph(self) -> dict[str, list[str]]:
        """Get the declared dependencies of every registered service.

        Returns:
            Mapping of service key to a copy of its ordered dependency keys

        """
        return {key: list(node.dependencies) for key, node in self._nodes.items()}

    def build(self) -> ServiceProvider:
        """Validate the dependency graph and build the service provider.

        Missing dependencies are checked before cycles, so a graph with both
        reports the missing dependency.

        Raises:
            MissingDependencyError: If a dependency is not registered
            CircularDependencyError: If the graph contains a cycle
            BuilderClosedError: If build() has already been called

        """
        self._ensure_open()
        self._closed = True

        graph = DependencyGraph(self.get_dependency_graph())
        logger.debug("Building service provider for %d services", len(graph))

        try:
            graph.validate_dependencies_exist()
            graph.detect_cycles()
            order = graph.topological_order()
        except ServiceGraphError as e:
            logger.error("Service graph validation failed: %s", e)
            raise

        factories: dict[str, ServiceFactory] = {}
        for key in order:
            node = self._nodes[key]
            injected = [factories[dep] for dep in node.dependencies]
            factories[key] = ServiceFactory(key, node, injected)
            node.is_registered = True

        logger.info("Built service provider with %d services", len(factories))
        return ServiceProvider(factories)

    def _add_factory(
        self,
        kind: NodeKind,
        factory: Callable[..., Any],
        inject: Sequence[ServiceKey],
        key: ServiceKey,
        lifetime: Lifetime | None,
    ) -> None:
        if not callable(factory):
            raise TypeError(f"Factory for {get_key_name(key)} must be callable")
        self._add(
            DependencyNode(
                key=get_key_name(key),
                kind=kind,
                dependencies=get_key_names(inject),
                target=factory,
                lifetime=self._lifetime(lifetime),
            )
        )

    def _add(self, node: DependencyNode) -> None:
        self._ensure_open()
        if node.key in self._nodes:
            raise DuplicateRegistrationError(node.key)

        self._nodes[node.key] = node
        logger.debug(
            "Registered %s service: %s with lifetime: %s",
            node.kind.value,
            node.key,
            node.lifetime,
        )

    def _lifetime(self, lifetime: Lifetime | None) -> Lifetime:
        if lifetime is None:
            return self._configuration.default_lifetime
        return Lifetime(lifetime)

    def _ensure_open(self) -> None:
        if self._closed:
            raise BuilderClosedError(
                "ServiceProviderBuilder has already been built and cannot be reused"
            )
