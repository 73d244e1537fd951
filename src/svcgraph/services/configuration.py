"""Builder configuration.

BuilderConfiguration holds the settings a ServiceProviderBuilder applies to
registrations that do not specify them explicitly. It follows the same
frozen, strict pydantic pattern used for all svcgraph configuration.
"""

from __future__ import annotations

import os
from typing import Any, Self

from pydantic import BaseModel, ConfigDict

from svcgraph.services.lifecycle import Lifetime

DEFAULT_LIFETIME_ENV_VAR = "SVCGRAPH_DEFAULT_LIFETIME"


class BuilderConfiguration(BaseModel):
    """Configuration for ServiceProviderBuilder.

    Features:
        - Pydantic validation for type safety
        - Immutable by default (frozen) for configuration integrity
        - from_properties() factory method for dictionary-based creation
        - from_env() factory method for environment-based creation

    Example:
        ```python
        config = BuilderConfiguration.from_properties({"default_lifetime": "transient"})
        builder = ServiceProviderBuilder(config)
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
        validate_assignment=True,
    )

    default_lifetime: Lifetime = Lifetime.SINGLETON

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties dictionary with validation.

        Args:
            properties: Dictionary containing configuration properties

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If properties are invalid

        """
        return cls.model_validate(properties)

    @classmethod
    def from_env(cls) -> Self:
        """Create configuration from environment variables.

        Reads SVCGRAPH_DEFAULT_LIFETIME when set; unset variables keep their
        defaults.

        Raises:
            ValidationError: If an environment value is invalid

        """
        properties: dict[str, Any] = {}
        default_lifetime = os.getenv(DEFAULT_LIFETIME_ENV_VAR)
        if default_lifetime:
            properties["default_lifetime"] = default_lifetime.strip().lower()
        return cls.from_properties(properties)
