"""Booking price calculation.

Everything here is a pure function of a BookingSelection and a
PricingConfig. Lookups that miss the config resolve to 0.
"""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal

from pricing.domain.models import BookingSelection, LineItem, PricingConfig
from pricing.domain.value_objects import (
    DRONE_ADDON,
    LEGACY_VIDEO_ADDON_PREFIX,
    DepositSplit,
    ServiceType,
)

ADDON_LABELS = {
    DRONE_ADDON: "Drone coverage",
    "highlightReel": "Highlight reel",
    "expressDelivery": "Express delivery",
    "studioRental": "Studio rental",
    "flyingDress": "Flying dress",
    "clearKayak": "Clear kayak",
}

DEFAULT_DEPOSIT_RATE = Decimal("0.5")


def resolve_photography_price(
    config: PricingConfig, service_type: ServiceType, tier: str | None, event_hours: int
) -> int | float:
    """Photography price for a tier, or the hourly total for events."""
    if service_type is ServiceType.EVENT:
        return config.event_photography.base_rate * event_hours
    if service_type is ServiceType.WEDDING:
        return config.wedding_photography.get(tier, 0)
    spec = config.photoshoot_photography.get(tier)
    return spec.price if spec is not None else 0


def resolve_video_price(
    config: PricingConfig, service_type: ServiceType, tier: str | None, event_hours: int
) -> int | float:
    """Videography price for a tier, or the hourly total for events."""
    if service_type is ServiceType.EVENT:
        return config.event_videography.base_rate * event_hours
    if service_type is ServiceType.WEDDING:
        return config.wedding_videography.get(tier, 0)
    return config.photoshoot_videography.get(tier, 0)


def addon_price(config: PricingConfig, key: str, service_type: ServiceType) -> int | float | None:
    """Price of a selected addon, or None when the key never contributes."""
    if key == DRONE_ADDON:
        drone_key = "droneWedding" if service_type is ServiceType.WEDDING else "dronePhotoshoot"
        return config.addons.get(drone_key, 0)
    if key.startswith(LEGACY_VIDEO_ADDON_PREFIX):
        return None
    return config.addons.get(key)


def people_surcharge(selection: BookingSelection, config: PricingConfig) -> int | float:
    if selection.service_type is ServiceType.PHOTOSHOOT and selection.people_count > 1:
        return (selection.people_count - 1) * config.additional_person_fee
    return 0


def calculate_total(selection: BookingSelection, config: PricingConfig) -> int | float:
    """Total price of a selection.

    base_price and video_price are read from the selection, where the
    controller keeps them resolved against the same config.
    """
    total = 0
    if selection.has_photo_package:
        total += selection.base_price
    if selection.has_video_package and selection.video_price:
        total += selection.video_price
    total += people_surcharge(selection, config)
    total += selection.transportation_fee
    for key in selection.addons:
        price = addon_price(config, key, selection.service_type)
        if price:
            total += price
    return total


def breakdown(selection: BookingSelection, config: PricingConfig) -> tuple[LineItem, ...]:
    """Itemized rows whose amounts sum to calculate_total()."""
    items = []
    if selection.has_photo_package:
        if selection.service_type is ServiceType.EVENT:
            label = f"Event photography ({selection.event_hours} hours)"
        else:
            label = f"{selection.service_type.value.title()} photography ({selection.package_type})"
        items.append(LineItem("photography", label, selection.base_price))

    if selection.has_video_package and selection.video_price:
        if selection.service_type is ServiceType.EVENT:
            label = f"Event videography ({selection.event_hours} hours)"
        else:
            label = (
                f"{selection.service_type.value.title()} videography "
                f"({selection.video_package_type})"
            )
        items.append(LineItem("videography", label, selection.video_price))

    surcharge = people_surcharge(selection, config)
    if surcharge:
        extra = selection.people_count - 1
        items.append(LineItem("additional_people", f"Additional people ({extra})", surcharge))

    items.append(LineItem("transportation", "Transportation", selection.transportation_fee))

    for key in selection.addons:
        price = addon_price(config, key, selection.service_type)
        if price:
            items.append(LineItem(f"addon:{key}", ADDON_LABELS.get(key, key), price))
    return tuple(items)


def _plain_number(value: Decimal) -> int | float:
    return int(value) if value == value.to_integral_value() else float(value)


def split_deposit(total: int | float, rate: Decimal | str = DEFAULT_DEPOSIT_RATE) -> DepositSplit:
    """Split a total into a whole-number deposit and the balance due.

    Only the deposit is rounded; deposit + balance always equals the total.
    """
    amount = max(Decimal("0"), Decimal(str(total)))
    deposit = (amount * Decimal(str(rate))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    if deposit > amount:
        deposit = amount.to_integral_value(rounding=ROUND_DOWN)
    deposit = max(Decimal("0"), deposit)
    return DepositSplit(deposit=int(deposit), balance=_plain_number(amount - deposit))
