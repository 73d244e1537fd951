"""Service keys, descriptors and lifetimes."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Lifetime(StrEnum):
    """Per-service lifetime policy."""

    SINGLETON = "singleton"
    TRANSIENT = "transient"


@dataclass(frozen=True)
class ServiceDescriptor:
    """Token identifying a service together with its static dependencies.

    Descriptors can be used anywhere a string key is accepted. Only
    descriptors passed to ``ServiceProviderBuilder.register()`` need an
    implementation.

    Attributes:
        key: Canonical service key
        implementation: Constructor invoked with the resolved dependencies
        dependencies: Ordered keys (or descriptors) passed positionally to the
            implementation

    Example:
        ```python
        CONFIG = ServiceDescriptor("config")
        REPOSITORY = ServiceDescriptor("repository", Repository, (CONFIG,))

        builder.register_instance(CONFIG, {"dsn": "sqlite://"})
        builder.register(REPOSITORY)
        ```

    """

    key: str
    implementation: Callable[..., Any] | None = None
    dependencies: tuple["ServiceKey", ...] = ()


type ServiceKey = str | ServiceDescriptor


def get_key_name(key: ServiceKey) -> str:
    """Return the canonical string key for a key or descriptor.

    Raises:
        TypeError: If key is neither a string nor a ServiceDescriptor

    """
    if isinstance(key, str):
        return key
    if isinstance(key, ServiceDescriptor):
        return key.key
    raise TypeError(
        f"Service key must be a str or ServiceDescriptor, got {type(key).__name__}"
    )


def get_key_names(keys: Iterable[ServiceKey]) -> list[str]:
    """Canonicalise keys, preserving order."""
    return [get_key_name(key) for key in keys]
