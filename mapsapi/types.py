"""Common request options and result types shared across the Maps APIs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class _StrEnum(str, Enum):
    """String enum whose ``str()`` is the wire value."""

    def __str__(self) -> str:
        return self.value


class Mode(_StrEnum):
    """Travel mode."""

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class Avoid(_StrEnum):
    """Route features to avoid."""

    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"


class Units(_StrEnum):
    """Unit system for human readable results."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class TransitMode(_StrEnum):
    """Transit mode for directions or distance matrix requests."""

    BUS = "bus"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"
    RAIL = "rail"


class TransitRoutingPreference(_StrEnum):
    """Bias for which transit routes are returned."""

    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


class TrafficModel(_StrEnum):
    """Traffic prediction model for future directions."""

    BEST_GUESS = "best_guess"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"


class PriceLevel(_StrEnum):
    """Price levels for the Places API."""

    FREE = "0"
    INEXPENSIVE = "1"
    MODERATE = "2"
    EXPENSIVE = "3"
    VERY_EXPENSIVE = "4"


class Component(_StrEnum):
    """Keys for structured address component filtering."""

    ROUTE = "route"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"
    POSTAL_CODE = "postal_code"
    COUNTRY = "country"


class RankBy(_StrEnum):
    """Ordering of Places Search results."""

    PROMINENCE = "prominence"
    DISTANCE = "distance"


def _mapping(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return data if data is not None else {}


@dataclass
class Distance:
    """A distance between two points."""

    human_readable: str = ""
    meters: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | None) -> Distance:
        """Build from the API's ``{"text", "value"}`` object."""
        data = _mapping(data)
        return cls(
            human_readable=data.get("text", ""),
            meters=int(data.get("value", 0)),
        )


@dataclass
class OpeningHoursOpenClose:
    """A day (0 = Sunday) and an ``hhmm`` time of day."""

    day: int = 0
    time: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | None) -> OpeningHoursOpenClose:
        """Build from the API's ``{"day", "time"}`` object."""
        data = _mapping(data)
        return cls(day=int(data.get("day", 0)), time=data.get("time", ""))


@dataclass
class OpeningHoursPeriod:
    """When a place opens and closes on one day."""

    open: OpeningHoursOpenClose = field(default_factory=OpeningHoursOpenClose)
    close: OpeningHoursOpenClose = field(default_factory=OpeningHoursOpenClose)

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | None) -> OpeningHoursPeriod:
        """Build from the API's ``{"open", "close"}`` object."""
        data = _mapping(data)
        return cls(
            open=OpeningHoursOpenClose.from_json(data.get("open")),
            close=OpeningHoursOpenClose.from_json(data.get("close")),
        )


@dataclass
class OpeningHours:
    """Opening hours for a Place Details result."""

    open_now: bool | None = None
    periods: list[OpeningHoursPeriod] = field(default_factory=list)
    weekday_text: list[str] = field(default_factory=list)
    permanently_closed: bool | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | None) -> OpeningHours:
        """Build from the API's opening hours object."""
        data = _mapping(data)
        return cls(
            open_now=data.get("open_now"),
            periods=[OpeningHoursPeriod.from_json(p) for p in data.get("periods") or []],
            weekday_text=list(data.get("weekday_text") or []),
            permanently_closed=data.get("permanently_closed"),
        )


@dataclass
class Photo:
    """A photo available with a search result."""

    photo_reference: str = ""
    height: int = 0
    width: int = 0
    html_attributions: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | None) -> Photo:
        """Build from the API's photo object."""
        data = _mapping(data)
        return cls(
            photo_reference=data.get("photo_reference", ""),
            height=int(data.get("height", 0)),
            width=int(data.get("width", 0)),
            html_attributions=list(data.get("html_attributions") or []),
        )


@dataclass
class PlaceEditorialSummary:
    """A textual overview of a place and its language."""

    language: str = ""
    overview: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | None) -> PlaceEditorialSummary:
        """Build from the API's editorial summary object."""
        data = _mapping(data)
        return cls(
            language=data.get("language", ""),
            overview=data.get("overview", ""),
        )