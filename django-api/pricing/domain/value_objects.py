"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


class ServiceType(Enum):
    """Bookable service lines."""

    PHOTOSHOOT = "photoshoot"
    WEDDING = "wedding"
    EVENT = "event"

    @classmethod
    def parse(cls, value: str | None) -> Self:
        """Parse a URL/query value, falling back to photoshoot."""
        try:
            return cls(value)
        except ValueError:
            return cls.PHOTOSHOOT


class Tier:
    """Package tier keys."""

    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"

    ALL = (BRONZE, SILVER, GOLD, PLATINUM)


# Selections carrying this prefix came from an older booking form where
# wedding video tiers were addons. They never contribute to the total.
LEGACY_VIDEO_ADDON_PREFIX = "videography-"

DRONE_ADDON = "drone"


@dataclass(frozen=True)
class PhotographerId:
    """Unique identifier for a photographer."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ConfigScope:
    """Which pricing table a config record belongs to."""

    photographer_id: PhotographerId | None = None

    @classmethod
    def global_default(cls) -> Self:
        return cls()

    @classmethod
    def for_photographer(cls, photographer_id: PhotographerId) -> Self:
        return cls(photographer_id=photographer_id)

    @property
    def is_global(self) -> bool:
        return self.photographer_id is None

    @property
    def key(self) -> str:
        if self.photographer_id is None:
            return "global"
        return f"photographer:{self.photographer_id}"


@dataclass(frozen=True)
class DepositSplit:
    """Up-front deposit and remaining balance for a booking total."""

    deposit: int
    balance: int | float

    def __post_init__(self) -> None:
        if self.deposit < 0 or self.balance < 0:
            raise ValueError("Deposit split cannot be negative")
