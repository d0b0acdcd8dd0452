"""Pricing service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pricing.domain import (
    DEFAULT_PRICING_CONFIG,
    BookingSnapshot,
    ConfigScope,
    PhotographerId,
    PricingConfig,
    ServiceType,
)
from pricing.domain.errors import InvalidPhotographerIdError, InvalidSelectionError
from pricing.services import price_calculator
from pricing.services.calculator_controller import CalculatorController
from pricing.stores.interfaces import PricingConfigStore

logger = logging.getLogger(__name__)


class PricingService:
    """Service for pricing config lookups and quotes."""

    def __init__(
        self,
        store: PricingConfigStore,
        deposit_rate: Decimal | str = price_calculator.DEFAULT_DEPOSIT_RATE,
    ) -> None:
        self._store = store
        self._deposit_rate = deposit_rate

    def get_effective_config(self, photographer_id: str | None = None) -> PricingConfig:
        """Return the config a booking form should price with.

        Photographer config first, then the global config, then the
        built-in defaults.

        Raises:
            InvalidPhotographerIdError: If photographer_id is not a valid UUID.
        """
        if photographer_id:
            scope = self._photographer_scope(photographer_id)
            config = self._store.get_config(scope)
            if config is not None:
                return config

        config = self._store.get_config(ConfigScope.global_default())
        if config is not None:
            return config
        return DEFAULT_PRICING_CONFIG

    def update_config(
        self, payload: Mapping[str, Any], photographer_id: str | None = None
    ) -> PricingConfig:
        """Validate an edited config and store it.

        Raises:
            InvalidPricingConfigError: If the payload is missing required sections.
            InvalidPhotographerIdError: If photographer_id is not a valid UUID.
        """
        PricingConfig.validate_payload(payload)
        if photographer_id:
            scope = self._photographer_scope(photographer_id)
        else:
            scope = ConfigScope.global_default()
        return self._store.save_config(scope, PricingConfig.from_dict(payload))

    def reset_config(self, photographer_id: str | None = None) -> bool:
        """Drop a stored config so the scope falls back to the next one."""
        if photographer_id:
            scope = self._photographer_scope(photographer_id)
        else:
            scope = ConfigScope.global_default()
        return self._store.delete_config(scope)

    def quote(
        self, selection: Mapping[str, Any], photographer_id: str | None = None
    ) -> BookingSnapshot:
        """Price a complete selection by replaying it through a controller.

        Raises:
            InvalidPhotographerIdError: If photographer_id is not a valid UUID.
            InvalidSelectionError: If the service type or transportation zone is unknown.
        """
        config = self.get_effective_config(photographer_id)

        service = selection.get("service_type") or ServiceType.PHOTOSHOOT.value
        try:
            ServiceType(service)
        except ValueError:
            raise InvalidSelectionError("service_type") from None

        controller = CalculatorController(config, service=service, deposit_rate=self._deposit_rate)
        if selection.get("event_hours") is not None:
            controller.set_event_hours(selection["event_hours"])
        if selection.get("package_type"):
            controller.set_package_type(selection["package_type"])
        if selection.get("has_video_package"):
            controller.toggle_video_package()
            if selection.get("video_package_type"):
                controller.set_video_package(selection["video_package_type"])
        if selection.get("people_count") is not None:
            controller.set_people_count(selection["people_count"])

        zone = selection.get("transportation_zone")
        if zone:
            if zone not in config.transportation:
                raise InvalidSelectionError("transportation_zone")
            controller.set_transportation_zone(zone)
        if selection.get("transportation_fee") is not None:
            controller.set_transportation_fee(selection["transportation_fee"])

        for key in dict.fromkeys(selection.get("addons") or ()):
            controller.toggle_addon(key)

        snapshot = controller.selection
        logger.debug(
            "Quoted %s/%s at %s (config v%s)",
            snapshot.service_type.value,
            snapshot.package_type,
            snapshot.total_price,
            config.version,
        )
        return snapshot

    @staticmethod
    def _photographer_scope(photographer_id: str) -> ConfigScope:
        try:
            return ConfigScope.for_photographer(PhotographerId.from_string(photographer_id))
        except (ValueError, AttributeError, TypeError):
            raise InvalidPhotographerIdError() from None
