"""Unit tests for PricingService.

These test config fallback, quote replay and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from dataclasses import replace

import pytest

from pricing.domain import DEFAULT_PRICING_CONFIG, ConfigScope, PhotographerId
from pricing.domain.defaults import DEFAULT_PRICING_PAYLOAD
from pricing.domain.errors import (
    InvalidPhotographerIdError,
    InvalidPricingConfigError,
    InvalidSelectionError,
)
from pricing.services.pricing_service import PricingService

PHOTOGRAPHER = "6f1c1d7e-2f7a-4f43-9d55-1b3c0a9e4a10"
OTHER_PHOTOGRAPHER = "0b8e5c64-84a4-4b7e-8f49-2a7d0f1b9c33"


@pytest.fixture
def service(memory_store) -> PricingService:
    return PricingService(memory_store)


def photographer_scope(value: str = PHOTOGRAPHER) -> ConfigScope:
    return ConfigScope.for_photographer(PhotographerId.from_string(value))


class TestEffectiveConfig:
    """Tests for the photographer -> global -> default fallback."""

    def test_defaults_when_nothing_stored(self, service):
        assert service.get_effective_config() is DEFAULT_PRICING_CONFIG

    def test_global_config_used(self, service, memory_store):
        stored = memory_store.save_config(
            ConfigScope.global_default(),
            replace(DEFAULT_PRICING_CONFIG, additional_person_fee=75),
        )
        assert service.get_effective_config() == stored
        assert service.get_effective_config(PHOTOGRAPHER) == stored

    def test_photographer_config_preferred(self, service, memory_store):
        memory_store.save_config(ConfigScope.global_default(), DEFAULT_PRICING_CONFIG)
        own = memory_store.save_config(
            photographer_scope(), replace(DEFAULT_PRICING_CONFIG, additional_person_fee=10)
        )

        assert service.get_effective_config(PHOTOGRAPHER) == own
        assert service.get_effective_config(OTHER_PHOTOGRAPHER).additional_person_fee == 50

    def test_invalid_photographer_id_raises_error(self, service):
        """get_effective_config raises InvalidPhotographerIdError for malformed UUID."""
        with pytest.raises(InvalidPhotographerIdError):
            service.get_effective_config("photographer-1")


class TestUpdateConfig:
    """Tests for saving edited configs."""

    def test_saves_global_config(self, service, memory_store):
        saved = service.update_config(DEFAULT_PRICING_PAYLOAD)
        assert saved.version == 1
        assert memory_store.configs["global"] == saved

    def test_saving_again_bumps_version(self, service):
        service.update_config(DEFAULT_PRICING_PAYLOAD)
        assert service.update_config(DEFAULT_PRICING_PAYLOAD).version == 2

    def test_saves_photographer_config(self, service, memory_store):
        service.update_config(DEFAULT_PRICING_PAYLOAD, PHOTOGRAPHER)
        assert photographer_scope().key in memory_store.configs

    def test_malformed_config_raises_error(self, service, memory_store):
        with pytest.raises(InvalidPricingConfigError):
            service.update_config({"packages": {}})
        assert memory_store.configs == {}

    def test_reset_config(self, service):
        service.update_config(DEFAULT_PRICING_PAYLOAD, PHOTOGRAPHER)
        assert service.reset_config(PHOTOGRAPHER) is True
        assert service.reset_config(PHOTOGRAPHER) is False


class TestQuote:
    """Tests for pricing a submitted selection."""

    def test_defaults(self, service):
        snapshot = service.quote({})
        assert snapshot.total_price == 185

    def test_wedding_gold_with_video(self, service):
        snapshot = service.quote(
            {"service_type": "wedding", "package_type": "gold", "has_video_package": True}
        )
        assert snapshot.video_package_type == "gold"
        assert snapshot.total_price == 2535
        assert (snapshot.deposit_amount, snapshot.balance_due) == (1268, 1267)

    def test_event_with_hours_and_video(self, service):
        snapshot = service.quote(
            {"service_type": "event", "event_hours": 4, "has_video_package": True}
        )
        assert snapshot.base_price == 600
        assert snapshot.video_price == 400
        assert snapshot.total_price == 1035

    def test_explicit_video_tier(self, service):
        snapshot = service.quote(
            {"has_video_package": True, "video_package_type": "platinum"}
        )
        assert snapshot.package_type == "bronze"
        assert snapshot.video_price == 750

    def test_zone_then_fee_override(self, service):
        assert service.quote({"transportation_zone": "other-parishes"}).total_price == 215
        snapshot = service.quote(
            {"transportation_zone": "other-parishes", "transportation_fee": 0}
        )
        assert snapshot.total_price == 150

    def test_duplicate_addons_count_once(self, service):
        snapshot = service.quote({"addons": ["drone", "drone", "flyingDress"]})
        assert snapshot.addons == ("drone", "flyingDress")
        assert snapshot.total_price == 185 + 150 + 120

    def test_people_count_clamped(self, service):
        assert service.quote({"people_count": 0}).people_count == 1

    def test_uses_photographer_config(self, service, memory_store):
        memory_store.save_config(
            photographer_scope(), replace(DEFAULT_PRICING_CONFIG, additional_person_fee=0)
        )
        assert service.quote({"people_count": 5}, PHOTOGRAPHER).total_price == 185
        assert service.quote({"people_count": 5}).total_price == 385

    def test_unknown_zone_raises_error(self, service):
        with pytest.raises(InvalidSelectionError) as excinfo:
            service.quote({"transportation_zone": "atlantis"})
        assert excinfo.value.field == "transportation_zone"

    def test_unknown_service_raises_error(self, service):
        with pytest.raises(InvalidSelectionError):
            service.quote({"service_type": "portrait"})
