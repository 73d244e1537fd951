"""One-time setup wrapper around ServiceProviderBuilder.

The orchestrator defers building the service graph until a provider is
first requested, then reuses that provider for the rest of the process.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from svcgraph.errors import NotConfiguredError
from svcgraph.services.builder import ServiceProviderBuilder
from svcgraph.services.configuration import BuilderConfiguration
from svcgraph.services.provider import ServiceProvider

logger = logging.getLogger(__name__)

type ConfigureServices = Callable[[ServiceProviderBuilder], None]


class ServiceOrchestrator:
    """Builds the service provider lazily and memoises it.

    Example:
        >>> orchestrator = ServiceOrchestrator()
        >>> orchestrator.setup(lambda builder: builder.register_instance("answer", 42))
        >>> orchestrator.get_provider().resolve("answer")
        42

    """

    def __init__(self, configuration: BuilderConfiguration | None = None) -> None:
        """Initialise the orchestrator.

        Args:
            configuration: Passed to the builder created by get_provider()

        """
        self._configuration = configuration
        self._configure: ConfigureServices | None = None
        self._provider: ServiceProvider | None = None

    @property
    def is_configured(self) -> bool:
        return self._configure is not None

    @property
    def is_built(self) -> bool:
        return self._provider is not None

    def setup(self, configure: ConfigureServices) -> None:
        """Store the callback that registers services.

        The callback is not invoked until get_provider() is first called.
        Calling setup() again replaces the stored callback.

        Args:
            configure: Called once with a fresh ServiceProviderBuilder

        """
        if self._provider is not None:
            logger.warning(
                "ServiceOrchestrator.setup() called after the provider was built; "
                "the existing provider will continue to be used"
            )
        self._configure = configure

    def get_provider(self) -> ServiceProvider:
        """Get the service provider, building it on first use.

        Raises:
            NotConfiguredError: If setup() has not been called
            MissingDependencyError: If the configured graph has a missing dependency
            CircularDependencyError: If the configured graph has a cycle

        """
        if self._provider is None:
            if self._configure is None:
                raise NotConfiguredError(
                    "ServiceOrchestrator is not set up. Call setup() first."
                )

            builder = ServiceProviderBuilder(self._configuration)
            self._configure(builder)
            self._provider = builder.build()
            logger.debug("ServiceOrchestrator provider created and cached")

        return self._provider
