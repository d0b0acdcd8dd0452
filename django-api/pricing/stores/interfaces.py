"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from pricing.domain import ConfigScope, PricingConfig


class PricingConfigStore(ABC):
    """Interface for pricing config persistence operations."""

    @abstractmethod
    def get_config(self, scope: ConfigScope) -> PricingConfig | None:
        """Return the config stored for a scope, or None if there is none."""
        ...

    @abstractmethod
    def save_config(self, scope: ConfigScope, config: PricingConfig) -> PricingConfig:
        """Persist a config for a scope and return it with its new version."""
        ...

    @abstractmethod
    def delete_config(self, scope: ConfigScope) -> bool:
        """Remove a scope's config. Returns False if nothing was stored."""
        ...
