from pricing.domain.defaults import DEFAULT_PRICING_CONFIG
from pricing.domain.models import (
    BookingSelection,
    BookingSnapshot,
    HourlyRate,
    LineItem,
    PhotoshootTier,
    PricingConfig,
)
from pricing.domain.value_objects import (
    ConfigScope,
    DepositSplit,
    PhotographerId,
    ServiceType,
    Tier,
)

__all__ = [
    "DEFAULT_PRICING_CONFIG",
    "BookingSelection",
    "BookingSnapshot",
    "HourlyRate",
    "LineItem",
    "PhotoshootTier",
    "PricingConfig",
    "ConfigScope",
    "DepositSplit",
    "PhotographerId",
    "ServiceType",
    "Tier",
]
