"""Stateful owner of one booking form's selection.

Every operation mutates the selection, re-resolves the derived prices and
re-runs the calculator before returning. Listeners are notified only when
the resulting snapshot differs from the last one they saw.
"""

import logging
from collections.abc import Awaitable, Callable
from decimal import Decimal

from pricing.domain.models import BookingSelection, BookingSnapshot, PricingConfig
from pricing.domain.value_objects import ServiceType, Tier
from pricing.services import price_calculator

logger = logging.getLogger(__name__)

Listener = Callable[[BookingSnapshot], None]
ConfigFetcher = Callable[[], Awaitable[PricingConfig | None]]


class CalculatorController:
    """Booking calculator state machine for a single form."""

    def __init__(
        self,
        config: PricingConfig,
        service: str | None = None,
        deposit_rate: Decimal | str = price_calculator.DEFAULT_DEPOSIT_RATE,
    ) -> None:
        self._config = config
        self._deposit_rate = deposit_rate
        self._listeners: list[Listener] = []
        self._selection = BookingSelection(
            service_type=ServiceType.parse(service),
            event_hours=config.minimum_event_hours,
            transportation_fee=config.default_transportation_fee,
        )
        self._resolve_base_price()
        self._recompute()
        self._last_snapshot = self.snapshot()

    @property
    def config(self) -> PricingConfig:
        return self._config

    @property
    def selection(self) -> BookingSnapshot:
        return self._last_snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> BookingSnapshot:
        selection = self._selection
        split = price_calculator.split_deposit(selection.total_price, self._deposit_rate)
        return BookingSnapshot(
            service_type=selection.service_type,
            package_type=selection.package_type,
            has_photo_package=selection.has_photo_package,
            has_video_package=selection.has_video_package,
            video_package_type=selection.video_package_type,
            base_price=selection.base_price,
            video_price=selection.video_price,
            people_count=selection.people_count,
            event_hours=selection.event_hours,
            transportation_fee=selection.transportation_fee,
            addons=tuple(selection.addons),
            total_price=selection.total_price,
            breakdown=price_calculator.breakdown(selection, self._config),
            deposit_amount=split.deposit,
            balance_due=split.balance,
        )

    # User operations

    def set_service_type(self, service_type: ServiceType | str) -> BookingSnapshot:
        """Switch service lines.

        Raises:
            ValueError: If service_type is not a known service value.
        """
        service_type = ServiceType(service_type)
        selection = self._selection
        selection.service_type = service_type
        selection.package_type = Tier.BRONZE
        selection.addons = []
        if service_type is ServiceType.EVENT:
            selection.event_hours = self._config.minimum_event_hours
        if selection.has_video_package:
            selection.video_package_type = Tier.BRONZE
        self._resolve_base_price()
        self._resolve_video_price()
        return self._commit()

    def set_package_type(self, tier: str) -> BookingSnapshot:
        selection = self._selection
        selection.package_type = tier
        self._resolve_base_price()
        if selection.has_video_package:
            selection.video_package_type = tier
            self._resolve_video_price()
        return self._commit()

    def set_people_count(self, count: int) -> BookingSnapshot:
        self._selection.people_count = max(1, int(count))
        return self._commit()

    def set_transportation_fee(self, fee: int | float) -> BookingSnapshot:
        self._selection.transportation_fee = fee
        return self._commit()

    def set_transportation_zone(self, zone: str) -> BookingSnapshot:
        return self.set_transportation_fee(self._config.zone_fee(zone))

    def set_event_hours(self, hours: int) -> BookingSnapshot:
        selection = self._selection
        selection.event_hours = max(self._config.minimum_event_hours, int(hours))
        if selection.service_type is ServiceType.EVENT:
            self._resolve_base_price()
            self._resolve_video_price()
        return self._commit()

    def toggle_addon(self, key: str) -> BookingSnapshot:
        addons = self._selection.addons
        if key in addons:
            addons.remove(key)
        else:
            addons.append(key)
        return self._commit()

    def toggle_video_package(self) -> BookingSnapshot:
        selection = self._selection
        selection.has_video_package = not selection.has_video_package
        if selection.has_video_package:
            selection.video_package_type = selection.package_type
        else:
            selection.video_package_type = None
        self._resolve_video_price()
        return self._commit()

    def set_video_package(self, tier: str) -> BookingSnapshot:
        """Pick a video tier independently of the photo tier."""
        self._selection.video_package_type = tier
        self._resolve_video_price()
        return self._commit()

    # External events

    def handle_service_signal(self, value: str | None) -> BookingSnapshot:
        """React to the `service` URL parameter changing (back/forward navigation)."""
        service_type = ServiceType.parse(value)
        if service_type is self._selection.service_type:
            return self._last_snapshot
        return self.set_service_type(service_type)

    def apply_config(self, config: PricingConfig) -> BookingSnapshot:
        """Re-price the current choices against a freshly loaded config."""
        self._config = config
        selection = self._selection
        if selection.event_hours < config.minimum_event_hours:
            selection.event_hours = config.minimum_event_hours
        self._resolve_base_price()
        self._resolve_video_price()
        return self._commit()

    async def load_config(self, fetch: ConfigFetcher) -> BookingSnapshot | None:
        """Await a config fetch and apply it.

        Fetch failures are logged and dropped; the current config stays in use.
        """
        try:
            config = await fetch()
        except Exception:
            logger.warning(
                "Pricing config fetch failed, keeping version %s",
                self._config.version,
                exc_info=True,
            )
            return None
        if config is None:
            logger.info(
                "Pricing config fetch returned nothing, keeping version %s",
                self._config.version,
            )
            return None
        return self.apply_config(config)

    # Derivation

    def _resolve_base_price(self) -> None:
        selection = self._selection
        selection.base_price = price_calculator.resolve_photography_price(
            self._config, selection.service_type, selection.package_type, selection.event_hours
        )

    def _resolve_video_price(self) -> None:
        selection = self._selection
        if not selection.has_video_package:
            selection.video_price = 0
            return
        selection.video_price = price_calculator.resolve_video_price(
            self._config,
            selection.service_type,
            selection.video_package_type,
            selection.event_hours,
        )

    def _recompute(self) -> bool:
        total = price_calculator.calculate_total(self._selection, self._config)
        if total == self._selection.total_price:
            return False
        self._selection.total_price = total
        return True

    def _commit(self) -> BookingSnapshot:
        self._recompute()
        snapshot = self.snapshot()
        if snapshot != self._last_snapshot:
            self._last_snapshot = snapshot
            for listener in list(self._listeners):
                listener(snapshot)
        return snapshot
