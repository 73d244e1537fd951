"""Service registration, validation and resolution."""

from svcgraph.services.builder import ServiceProviderBuilder
from svcgraph.services.configuration import BuilderConfiguration
from svcgraph.services.factory import ServiceFactory
from svcgraph.services.lifecycle import (
    Lifetime,
    ServiceDescriptor,
    ServiceKey,
    get_key_name,
)
from svcgraph.services.node import DependencyNode, NodeKind
from svcgraph.services.protocols import ServiceRegistry, ServiceResolver
from svcgraph.services.provider import ServiceProvider

__all__ = [
    "BuilderConfiguration",
    "DependencyNode",
    "Lifetime",
    "NodeKind",
    "ServiceDescriptor",
    "ServiceFactory",
    "ServiceKey",
    "ServiceProvider",
    "ServiceProviderBuilder",
    "ServiceRegistry",
    "ServiceResolver",
    "get_key_name",
]
