"""Instantiation unit that lazily builds a single service."""

import logging
from collections.abc import Sequence
from functools import partial
from typing import Any

from svcgraph.errors import AsyncDependencyError, ServiceTypeMissingError
from svcgraph.services.lifecycle import Lifetime
from svcgraph.services.node import DependencyNode, NodeKind

logger = logging.getLogger(__name__)


class ServiceFactory:
    """Builds the instance for one dependency node on demand.

    Dependencies are supplied as already-wrapped factories, so building a
    service recursively builds whatever it needs first. Singleton instances
    are cached on the node; transient services are rebuilt on every call.
    """

    def __init__(
        self,
        key: str,
        node: DependencyNode,
        injected_factories: Sequence["ServiceFactory"],
    ) -> None:
        """Initialise the factory.

        Args:
            key: Service key this factory builds
            node: Graph node describing the service
            injected_factories: Factories for the node's dependencies, in
                declared order

        """
        self._key = key
        self._node = node
        self._injected_factories = tuple(injected_factories)

    @property
    def key(self) -> str:
        return self._key

    @property
    def lifetime(self) -> Lifetime:
        return self._node.lifetime

    @property
    def is_async(self) -> bool:
        return self._node.is_async

    @property
    def has_instance(self) -> bool:
        return self._node.has_instance

    def build(self, *args: Any) -> Any:
        """Build (or return the cached) service instance.

        Dependencies are built recursively, so a dependency chain deeper than
        the interpreter's recursion limit raises RecursionError here.

        Args:
            *args: Extra call-time arguments appended after the resolved
                dependencies

        Returns:
            The service instance. For async factories, a coroutine that
            yields the instance when awaited.

        Raises:
            ServiceTypeMissingError: If the node has neither an instance nor a target
            AsyncDependencyError: If a dependency is an async factory whose
                instance has not been awaited and cached yet

        """
        if self._node.has_instance:
            logger.debug("Returning cached singleton service: %s", self._key)
            return self._node.instance

        if self._node.is_async:
            return self.build_async(*args)

        for factory in self._injected_factories:
            if factory.is_async and not factory.has_instance:
                logger.error(
                    "Service %s needs async service %s; use resolve_async()",
                    self._key,
                    factory.key,
                )
                raise AsyncDependencyError(self._key, factory.key)

        resolved = [factory.build() for factory in self._injected_factories]
        return self._create(resolved, args)

    async def build_async(self, *args: Any) -> Any:
        """Build the service, awaiting any asynchronous dependencies.

        Dependencies are built with ``build_async()`` so services registered
        with an async factory are injected as their awaited values. When
        several resolutions of a singleton overlap, the first instance to be
        cached is returned to all of them.
        """
        if self._node.has_instance:
            logger.debug("Returning cached singleton service: %s", self._key)
            return self._node.instance

        resolved = [
            await factory.build_async() for factory in self._injected_factories
        ]
        # Another resolution may have finished while dependencies were awaited
        if self._node.has_instance:
            return self._node.instance

        if not self._node.is_async:
            return self._create(resolved, args)

        target = self._require_target()
        logger.debug("Awaiting %s async factory: %s", self._node.lifetime, self._key)
        instance = await target(*resolved, *args)
        # Another resolution may have finished first; keep its instance
        if self._node.has_instance:
            return self._node.instance
        self._node.remember(instance)
        return instance

    def _create(self, resolved: list[Any], args: tuple[Any, ...]) -> Any:
        target = self._require_target()
        logger.debug("Creating %s service: %s", self._node.lifetime, self._key)

        if self._node.kind is NodeKind.FACTORY:
            bound = partial(target, *resolved)
            instance = bound(*args)
        else:
            instance = target(*resolved, *args)

        self._node.remember(instance)
        return instance

    def _require_target(self) -> Any:
        if self._node.target is None:
            logger.error("Service %s has no constructor, factory or instance", self._key)
            raise ServiceTypeMissingError(self._key)
        return self._node.target

    def __repr__(self) -> str:
        return f"ServiceFactory(key={self._key!r}, kind={self._node.kind.value})"
