"""Dependency graph node describing one registered service."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from svcgraph.services.lifecycle import Lifetime

_NO_INSTANCE: Any = object()


class NodeKind(Enum):
    """How a node produces its instance."""

    CONSTRUCTOR = "constructor"
    FACTORY = "factory"
    ASYNC_FACTORY = "async_factory"
    INSTANCE = "instance"


@dataclass
class DependencyNode:
    """A registered service in the dependency graph.

    Attributes:
        key: Canonical service key
        kind: Registration variant (constructor, factory, async factory, instance)
        dependencies: Keys of the services this one requires, in argument order
        target: Constructor or factory function; None for instance nodes
        lifetime: Singleton nodes cache their instance, transient nodes never do
        is_registered: True once supplied up front or wrapped into a provider

    """

    key: str
    kind: NodeKind
    dependencies: list[str] = field(default_factory=list)
    target: Callable[..., Any] | None = None
    lifetime: Lifetime = Lifetime.SINGLETON
    is_registered: bool = False
    _instance: Any = field(default=_NO_INSTANCE, repr=False)

    @classmethod
    def for_instance(
        cls, key: str, instance: Any, lifetime: Lifetime = Lifetime.SINGLETON
    ) -> "DependencyNode":
        """Create a node for a pre-built instance."""
        node = cls(key=key, kind=NodeKind.INSTANCE, lifetime=lifetime)
        node._instance = instance
        node.is_registered = True
        return node

    @property
    def is_factory(self) -> bool:
        return self.kind in (NodeKind.FACTORY, NodeKind.ASYNC_FACTORY)

    @property
    def is_async(self) -> bool:
        return self.kind is NodeKind.ASYNC_FACTORY

    @property
    def has_instance(self) -> bool:
        return self._instance is not _NO_INSTANCE

    @property
    def instance(self) -> Any:
        """The cached instance, or None if nothing is cached."""
        return None if self._instance is _NO_INSTANCE else self._instance

    def remember(self, instance: Any) -> None:
        """Cache instance if this node is a singleton."""
        if self.lifetime == Lifetime.SINGLETON:
            self._instance = instance
