"""Core entities for the weather lookup widget."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from .icons import IconCategory


GENERIC_ERROR_MESSAGE = "Location not found or API error. Please try again."
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class GeoResolution:
    latitude: float
    longitude: float
    country: str


@dataclass(frozen=True)
class NormalizedWeather:
    """Current conditions in the one shape the presentation layer reads.

    ``wind_speed`` is kept in whatever unit the provider reported it in;
    ``wind_speed_unit`` names that unit so nothing downstream has to guess.
    """

    location_name: str
    country_code: str
    temperature_c: float
    humidity_percent: Optional[float]
    wind_speed: float
    wind_speed_unit: str
    condition_code: int
    description: str
    icon: IconCategory
    provider: str


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass(frozen=True)
class LookupFailure:
    """User-facing failure of a lookup. ``kind`` is for diagnostics only."""

    message: str
    kind: ErrorKind = field(default=ErrorKind.TRANSPORT_FAILURE, compare=False)


class Pending:
    """Marker for a lookup that has started but not completed."""

    def __repr__(self) -> str:
        return "PENDING"


PENDING = Pending()

LookupResult = Union[NormalizedWeather, LookupFailure]


@dataclass
class LookupState:
    """Latest-value state of a widget: the location and exactly one outcome."""

    location: str = ""
    result: Union[NormalizedWeather, LookupFailure, Pending, None] = None

    @property
    def pending(self) -> bool:
        return self.result is PENDING

    @property
    def weather(self) -> Optional[NormalizedWeather]:
        if isinstance(self.result, NormalizedWeather):
            return self.result
        return None

    @property
    def error(self) -> Optional[str]:
        if isinstance(self.result, LookupFailure):
            return self.result.message
        return None

    @property
    def status(self) -> str:
        if self.pending:
            return "pending"
        if self.weather is not None:
            return "ready"
        if self.error is not None:
            return "error"
        return "idle"


__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "NOT_AVAILABLE",
    "ErrorKind",
    "GeoResolution",
    "LookupFailure",
    "LookupResult",
    "LookupState",
    "NormalizedWeather",
    "PENDING",
    "Pending",
]
