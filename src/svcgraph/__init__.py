"""svcgraph - Dependency graph based service container.

This package provides a dependency injection container that validates the
service dependency graph (missing dependencies, cycles) before anything is
built, then resolves services lazily in dependency order.
"""

__version__ = "0.1.0"

from svcgraph.dag import DependencyGraph
from svcgraph.errors import (
    AsyncDependencyError,
    BuilderClosedError,
    CircularDependencyError,
    DuplicateRegistrationError,
    MissingDependencyError,
    NotConfiguredError,
    ServiceGraphError,
    ServiceNotRegisteredError,
    ServiceTypeMissingError,
)
from svcgraph.orchestrator import ServiceOrchestrator
from svcgraph.services import (
    BuilderConfiguration,
    Lifetime,
    ServiceDescriptor,
    ServiceFactory,
    ServiceKey,
    ServiceProvider,
    ServiceProviderBuilder,
    ServiceRegistry,
    ServiceResolver,
    get_key_name,
)

__all__ = [
    # Version
    "__version__",
    # Container
    "BuilderConfiguration",
    "DependencyGraph",
    "Lifetime",
    "ServiceDescriptor",
    "ServiceFactory",
    "ServiceKey",
    "ServiceOrchestrator",
    "ServiceProvider",
    "ServiceProviderBuilder",
    "ServiceRegistry",
    "ServiceResolver",
    # Utilities
    "get_key_name",
    # Errors
    "AsyncDependencyError",
    "BuilderClosedError",
    "CircularDependencyError",
    "DuplicateRegistrationError",
    "MissingDependencyError",
    "NotConfiguredError",
    "ServiceGraphError",
    "ServiceNotRegisteredError",
    "ServiceTypeMissingError",
]
