"""Pytest configuration and shared fixtures."""

from dataclasses import replace

import pytest
from rest_framework.test import APIClient

from pricing.domain import DEFAULT_PRICING_CONFIG, ConfigScope, PricingConfig
from pricing.stores.interfaces import PricingConfigStore


class InMemoryPricingConfigStore(PricingConfigStore):
    """Dict-backed store for service and controller tests."""

    def __init__(self) -> None:
        self.configs: dict[str, PricingConfig] = {}
        self.reads = 0

    def get_config(self, scope: ConfigScope) -> PricingConfig | None:
        self.reads += 1
        return self.configs.get(scope.key)

    def save_config(self, scope: ConfigScope, config: PricingConfig) -> PricingConfig:
        previous = self.configs.get(scope.key)
        saved = replace(config, version=previous.version + 1 if previous else 1)
        self.configs[scope.key] = saved
        return saved

    def delete_config(self, scope: ConfigScope) -> bool:
        return self.configs.pop(scope.key, None) is not None


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def admin_api_client(db, django_user_model) -> APIClient:
    user = django_user_model.objects.create_user(
        username="admin", password="not-used", is_staff=True
    )
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def memory_store() -> InMemoryPricingConfigStore:
    return InMemoryPricingConfigStore()


@pytest.fixture
def default_config() -> PricingConfig:
    return DEFAULT_PRICING_CONFIG


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
