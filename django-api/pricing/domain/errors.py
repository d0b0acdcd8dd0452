"""Domain error codes for the pricing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_PHOTOGRAPHER_ID = "INVALID_PHOTOGRAPHER_ID"
    INVALID_PRICING_CONFIG = "INVALID_PRICING_CONFIG"
    INVALID_SELECTION = "INVALID_SELECTION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPhotographerIdError(DomainError):
    """Raised when a photographer ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PHOTOGRAPHER_ID,
            message="Invalid photographer ID format",
        )


class InvalidPricingConfigError(DomainError):
    """Raised when an edited pricing config does not have the expected shape."""

    def __init__(self, path: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PRICING_CONFIG,
            message=f"Invalid pricing config at {path}",
        )
        object.__setattr__(self, "path", path)


class InvalidSelectionError(DomainError):
    """Raised when a quote request cannot be read as a booking selection."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SELECTION,
            message=f"Invalid value for {field}",
        )
        object.__setattr__(self, "field", field)
