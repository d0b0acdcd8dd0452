"""Domain models for pricing tables and booking selections.

These are pure domain objects with no persistence concerns.
Django ORM models are in pricing/models.py (persistence layer).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from pricing.domain.errors import InvalidPricingConfigError
from pricing.domain.value_objects import ServiceType, Tier


def _number(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _section(payload: Any, *path: str) -> Mapping[str, Any]:
    node = payload
    for key in path:
        if not isinstance(node, Mapping):
            return {}
        node = node.get(key)
    return node if isinstance(node, Mapping) else {}


def _price_table(node: Mapping[str, Any]) -> dict[str, int | float]:
    table = {}
    for key, value in node.items():
        number = _number(value)
        if number is not None:
            table[key] = number
    return table


@dataclass(frozen=True)
class PhotoshootTier:
    """A photoshoot package level and what it includes."""

    price: int | float
    duration_minutes: int = 0
    image_count: int = 0
    location_count: int = 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Self | None:
        price = _number(payload.get("price"))
        if price is None:
            return None
        return cls(
            price=price,
            duration_minutes=_number(payload.get("duration")) or 0,
            image_count=_number(payload.get("images")) or 0,
            location_count=_number(payload.get("locations")) or 0,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "price": self.price,
            "duration": self.duration_minutes,
            "images": self.image_count,
            "locations": self.location_count,
        }


@dataclass(frozen=True)
class HourlyRate:
    """Per-hour pricing with a booking minimum."""

    base_rate: int | float = 0
    minimum_hours: int = 1

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Self:
        minimum = _number(payload.get("minimumHours"))
        return cls(
            base_rate=_number(payload.get("baseRate")) or 0,
            minimum_hours=max(1, int(minimum)) if minimum is not None else 1,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"baseRate": self.base_rate, "minimumHours": self.minimum_hours}


@dataclass(frozen=True)
class PricingConfig:
    """Price table for every service line, addon and fee.

    Any lookup that misses resolves to 0, so partially edited configs still
    price a booking instead of failing.
    """

    photoshoot_photography: Mapping[str, PhotoshootTier] = field(default_factory=dict)
    photoshoot_videography: Mapping[str, int | float] = field(default_factory=dict)
    wedding_photography: Mapping[str, int | float] = field(default_factory=dict)
    wedding_videography: Mapping[str, int | float] = field(default_factory=dict)
    event_photography: HourlyRate = field(default_factory=HourlyRate)
    event_videography: HourlyRate = field(default_factory=HourlyRate)
    addons: Mapping[str, int | float] = field(default_factory=dict)
    additional_person_fee: int | float = 0
    transportation: Mapping[str, int | float] = field(default_factory=dict)
    version: int = 1

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], version: int = 1) -> Self:
        """Build a config from the JSON shape, skipping anything unreadable."""
        photoshoot_tiers = {}
        for tier, node in _section(payload, "packages", "photoshoot", "photography").items():
            if isinstance(node, Mapping):
                parsed = PhotoshootTier.from_dict(node)
                if parsed is not None:
                    photoshoot_tiers[tier] = parsed

        return cls(
            photoshoot_photography=photoshoot_tiers,
            photoshoot_videography=_price_table(
                _section(payload, "packages", "photoshoot", "videography")
            ),
            wedding_photography=_price_table(
                _section(payload, "packages", "wedding", "photography")
            ),
            wedding_videography=_price_table(
                _section(payload, "packages", "wedding", "videography")
            ),
            event_photography=HourlyRate.from_dict(
                _section(payload, "packages", "event", "photography")
            ),
            event_videography=HourlyRate.from_dict(
                _section(payload, "packages", "event", "videography")
            ),
            addons=_price_table(_section(payload, "addons")),
            additional_person_fee=_number(_section(payload, "fees").get("additionalPerson")) or 0,
            transportation=_price_table(_section(payload, "fees", "transportation")),
            version=version,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "packages": {
                "photoshoot": {
                    "photography": {
                        tier: spec.to_dict() for tier, spec in self.photoshoot_photography.items()
                    },
                    "videography": dict(self.photoshoot_videography),
                },
                "wedding": {
                    "photography": dict(self.wedding_photography),
                    "videography": dict(self.wedding_videography),
                },
                "event": {
                    "photography": self.event_photography.to_dict(),
                    "videography": self.event_videography.to_dict(),
                },
            },
            "addons": dict(self.addons),
            "fees": {
                "additionalPerson": self.additional_person_fee,
                "transportation": dict(self.transportation),
            },
        }

    @staticmethod
    def validate_payload(payload: Any) -> None:
        """Strict shape check for configs coming from the admin editor.

        Raises:
            InvalidPricingConfigError: With the dotted path of the first bad node.
        """

        def require_mapping(node: Any, path: str) -> Mapping[str, Any]:
            if not isinstance(node, Mapping):
                raise InvalidPricingConfigError(path)
            return node

        def require_price(node: Any, path: str) -> None:
            number = _number(node)
            if number is None or number < 0:
                raise InvalidPricingConfigError(path)

        root = require_mapping(payload, "config")
        packages = require_mapping(root.get("packages"), "packages")

        photoshoot = require_mapping(packages.get("photoshoot"), "packages.photoshoot")
        photo_tiers = require_mapping(
            photoshoot.get("photography"), "packages.photoshoot.photography"
        )
        for tier, node in photo_tiers.items():
            path = f"packages.photoshoot.photography.{tier}"
            require_price(require_mapping(node, path).get("price"), f"{path}.price")

        for service in ("photoshoot", "wedding"):
            service_node = require_mapping(packages.get(service), f"packages.{service}")
            kinds = ("videography",) if service == "photoshoot" else ("photography", "videography")
            for kind in kinds:
                path = f"packages.{service}.{kind}"
                for tier, price in require_mapping(service_node.get(kind), path).items():
                    require_price(price, f"{path}.{tier}")

        event = require_mapping(packages.get("event"), "packages.event")
        for kind in ("photography", "videography"):
            path = f"packages.event.{kind}"
            node = require_mapping(event.get(kind), path)
            require_price(node.get("baseRate"), f"{path}.baseRate")
            require_price(node.get("minimumHours"), f"{path}.minimumHours")

        for key, price in require_mapping(root.get("addons"), "addons").items():
            require_price(price, f"addons.{key}")

        fees = require_mapping(root.get("fees"), "fees")
        require_price(fees.get("additionalPerson"), "fees.additionalPerson")
        for zone, price in require_mapping(fees.get("transportation"), "fees.transportation").items():
            require_price(price, f"fees.transportation.{zone}")

    def zone_fee(self, zone: str) -> int | float:
        return self.transportation.get(zone, 0)

    @property
    def default_transportation_fee(self) -> int | float:
        """Fee of the first configured zone, the form's preselected parish."""
        for fee in self.transportation.values():
            return fee
        return 0

    @property
    def minimum_event_hours(self) -> int:
        return self.event_photography.minimum_hours


@dataclass
class BookingSelection:
    """Mutable set of choices behind one booking form.

    Owned by a single CalculatorController. base_price, video_price and
    total_price are derived and only written by the controller.
    """

    service_type: ServiceType = ServiceType.PHOTOSHOOT
    package_type: str = Tier.BRONZE
    has_photo_package: bool = True
    has_video_package: bool = False
    video_package_type: str | None = None
    base_price: int | float = 0
    video_price: int | float = 0
    people_count: int = 1
    event_hours: int = 1
    transportation_fee: int | float = 0
    addons: list[str] = field(default_factory=list)
    total_price: int | float = 0


@dataclass(frozen=True)
class LineItem:
    """One row of an itemized price breakdown."""

    code: str
    label: str
    amount: int | float

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "label": self.label, "amount": self.amount}


@dataclass(frozen=True)
class BookingSnapshot:
    """Read-only view of a BookingSelection handed to the presentation layer."""

    service_type: ServiceType
    package_type: str
    has_photo_package: bool
    has_video_package: bool
    video_package_type: str | None
    base_price: int | float
    video_price: int | float
    people_count: int
    event_hours: int
    transportation_fee: int | float
    addons: tuple[str, ...]
    total_price: int | float
    breakdown: tuple[LineItem, ...] = ()
    deposit_amount: int = 0
    balance_due: int | float = 0

    def to_record(self) -> dict[str, Any]:
        """Flat booking record for the booking-creation collaborator."""
        return {
            "serviceType": self.service_type.value,
            "packageType": self.package_type,
            "hasPhotoPackage": self.has_photo_package,
            "hasVideoPackage": self.has_video_package,
            "videoPackageType": self.video_package_type,
            "basePrice": self.base_price,
            "videoPrice": self.video_price,
            "numberOfPeople": self.people_count,
            "eventHours": self.event_hours,
            "transportationFee": self.transportation_fee,
            "addons": list(self.addons),
            "totalPrice": self.total_price,
            "depositAmount": self.deposit_amount,
            "balanceDue": self.balance_due,
        }
