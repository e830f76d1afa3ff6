"""Time Zone API request and result."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping
from urllib.parse import urlencode

from .staticmap import _latlng_str

TIMEZONE_HOST = "https://maps.googleapis.com"
TIMEZONE_PATH = "/maps/api/timezone/json"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_ACCEPTED_STATUSES = ("OK", "ZERO_RESULTS")


@dataclass
class TimezoneRequest:
    """Parameters of a Time Zone API request."""

    location: Any = None
    timestamp: datetime = field(default_factory=lambda: _ZERO_TIME)
    language: str = ""

    def validate(self) -> None:
        """Raise ValueError if the location is missing."""
        if self.location is None:
            raise ValueError("location missing")

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters, each key mapped to its values."""
        self.validate()
        query = {
            "location": [_latlng_str(self.location)],
            "timestamp": [str(math.floor(self.timestamp.timestamp()))],
        }
        if self.language:
            query["language"] = [self.language]
        return query

    def encode(self) -> str:
        """Return the URL-encoded query string, keys sorted."""
        return urlencode(sorted(self.params().items()), doseq=True)


@dataclass
class TimezoneResult:
    """A single time zone result."""

    dst_offset: int = 0
    raw_offset: int = 0
    time_zone_id: str = ""
    time_zone_name: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> TimezoneResult:
        """Build from the API's JSON response.

        Raises ValueError when the response status reports a failure.
        """
        status = data.get("status", "OK")
        if status not in _ACCEPTED_STATUSES:
            message = data.get("error_message", "")
            raise ValueError(f"{status} - {message}" if message else status)
        return cls(
            dst_offset=int(data.get("dstOffset", 0)),
            raw_offset=int(data.get("rawOffset", 0)),
            time_zone_id=data.get("timeZoneId", ""),
            time_zone_name=data.get("timeZoneName", ""),
        )