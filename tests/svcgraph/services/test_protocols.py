"""Tests for service protocols - conformance of the standard implementations."""

from svcgraph import ServiceRegistry, ServiceResolver


class TestServiceResolverProtocol:
    """Test suite for ServiceResolver conformance."""

    def test_provider_implements_resolver(self, builder):
        provider = builder.build()

        assert isinstance(provider, ServiceResolver)

    def test_stub_resolver_can_stand_in_for_provider(self):
        """Verify a hand-written stub satisfies the protocol for consumers."""

        # Arrange
        class StubResolver:
            def __init__(self, services):
                self._services = services

            def resolve(self, key, *args):
                return self._services[key]

            async def resolve_async(self, key, *args):
                return self._services[key]

            def is_available(self, key):
                return key in self._services

        def describe(resolver: ServiceResolver) -> str:
            return resolver.resolve("name") if resolver.is_available("name") else "none"

        # Act
        stub = StubResolver({"name": "stubbed"})

        # Assert
        assert isinstance(stub, ServiceResolver)
        assert describe(stub) == "stubbed"

    def test_object_without_methods_is_not_a_resolver(self):
        assert not isinstance(object(), ServiceResolver)


class TestServiceRegistryProtocol:
    """Test suite for ServiceRegistry conformance."""

    def test_builder_implements_registry(self, builder):
        assert isinstance(builder, ServiceRegistry)

    def test_provider_is_not_a_registry(self, builder):
        assert not isinstance(builder.build(), ServiceRegistry)
