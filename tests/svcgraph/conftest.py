"""Shared test fixtures for svcgraph tests."""

import pytest

from svcgraph import ServiceProviderBuilder


class Recorder:
    """Counts calls to a wrapped factory and remembers their arguments."""

    def __init__(self, factory):
        self._factory = factory
        self.calls: list[tuple] = []

    @property
    def count(self) -> int:
        return len(self.calls)

    def __call__(self, *args):
        self.calls.append(args)
        return self._factory(*args)


@pytest.fixture
def builder() -> ServiceProviderBuilder:
    """Provide a fresh builder with default configuration."""
    return ServiceProviderBuilder()


@pytest.fixture
def recorder():
    """Provide a function that wraps a factory in a call-counting Recorder."""
    return Recorder
