"""Read-through cache in front of another PricingConfigStore."""

from django.conf import settings
from django.core.cache import cache

from pricing.domain import ConfigScope, PricingConfig
from pricing.stores.interfaces import PricingConfigStore


def config_cache_key(scope_key: str) -> str:
    return f"pricing:config:{scope_key}"


class CachedPricingConfigStore(PricingConfigStore):
    """Caches per-scope reads in Django's cache.

    Misses are cached too, so scopes without their own config do not hit the
    database on every quote.
    """

    def __init__(self, inner: PricingConfigStore, timeout: int | None = None) -> None:
        self._inner = inner
        self._timeout = timeout if timeout is not None else settings.PRICING_CACHE_TTL

    def get_config(self, scope: ConfigScope) -> PricingConfig | None:
        key = config_cache_key(scope.key)
        cached = cache.get(key)
        if cached is not None:
            if cached["config"] is None:
                return None
            return PricingConfig.from_dict(cached["config"], version=cached["version"])

        config = self._inner.get_config(scope)
        cache.set(
            key,
            {
                "config": config.to_dict() if config is not None else None,
                "version": config.version if config is not None else 0,
            },
            self._timeout,
        )
        return config

    def save_config(self, scope: ConfigScope, config: PricingConfig) -> PricingConfig:
        saved = self._inner.save_config(scope, config)
        cache.delete(config_cache_key(scope.key))
        return saved

    def delete_config(self, scope: ConfigScope) -> bool:
        deleted = self._inner.delete_config(scope)
        cache.delete(config_cache_key(scope.key))
        return deleted
