"""Maps Static API requests: markers, paths, query parameters and image decoding."""

from __future__ import annotations

import io
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Sequence
from urllib.parse import urlencode

import requests
from PIL import Image

from .types import _StrEnum

STATIC_MAP_HOST = "https://maps.googleapis.com"
STATIC_MAP_PATH = "/maps/api/staticmap"


class MapType(_StrEnum):
    """Type of map to render."""

    ROADMAP = "roadmap"
    SATELLITE = "satellite"
    TERRAIN = "terrain"
    HYBRID = "hybrid"


class Format(_StrEnum):
    """Image format of the rendered map."""

    PNG8 = "png8"
    PNG32 = "png32"
    GIF = "gif"
    JPG = "jpg"
    JPG_BASELINE = "jpg-baseline"


class MarkerSize(_StrEnum):
    """Size of a marker."""

    TINY = "tiny"
    MID = "mid"
    SMALL = "small"


class Anchor(_StrEnum):
    """How a custom icon is placed relative to its location."""

    TOP = "top"
    BOTTOM = "Bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    TOPLEFT = "topleft"
    TOPRIGHT = "topright"
    BOTTOMLEFT = "bottomleft"
    BOTTOMRIGHT = "bottomright"


def _format_coordinate(value: float) -> str:
    """Shortest decimal form of a coordinate, never in exponent notation."""
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _coordinates(location: Any) -> tuple[float, float]:
    if hasattr(location, "lat") and hasattr(location, "lng"):
        return float(location.lat), float(location.lng)
    lat, lng = location
    return float(lat), float(lng)


def _latlng_str(location: Any) -> str:
    """Render a location, given as a ``(lat, lng)`` pair or an object with
    ``lat`` and ``lng`` attributes, as ``"lat,lng"``."""
    lat, lng = _coordinates(location)
    return f"{_format_coordinate(lat)},{_format_coordinate(lng)}"


def _encode_signed(value: int) -> str:
    shifted = value << 1
    if value < 0:
        shifted = ~shifted
    chunks = []
    while shifted >= 0x20:
        chunks.append(chr((0x20 | (shifted & 0x1F)) + 63))
        shifted >>= 5
    chunks.append(chr(shifted + 63))
    return "".join(chunks)


def _encode_polyline(locations: Sequence[Any]) -> str:
    """Encode locations with the encoded polyline algorithm."""
    out = []
    prev_lat = prev_lng = 0
    for location in locations:
        lat, lng = _coordinates(location)
        ilat = math.floor(lat * 1e5 + 0.5)
        ilng = math.floor(lng * 1e5 + 0.5)
        out.append(_encode_signed(ilat - prev_lat))
        out.append(_encode_signed(ilng - prev_lng))
        prev_lat, prev_lng = ilat, ilng
    return "".join(out)


@dataclass(frozen=True)
class CustomIcon:
    """A custom icon replacing the default map pin."""

    icon_url: str = ""
    anchor: Anchor | str = ""
    scale: int = 0

    def __str__(self) -> str:
        parts = []
        if self.icon_url:
            parts.append(f"icon:{self.icon_url}")
        if self.anchor:
            parts.append(f"anchor:{self.anchor}")
        if self.scale:
            parts.append(f"scale:{self.scale}")
        return "|".join(parts)


@dataclass
class Marker:
    """A map pin at one or more locations."""

    color: str = ""
    label: str = ""
    size: MarkerSize | str = ""
    custom_icon: CustomIcon = field(default_factory=CustomIcon)
    locations: list[Any] = field(default_factory=list)
    location_address: str = ""

    def __str__(self) -> str:
        parts = []
        if self.custom_icon != CustomIcon():
            parts.append(str(self.custom_icon))
        else:
            if self.color:
                parts.append(f"color:{self.color}")
            if self.label:
                parts.append(f"label:{self.label}")
            if self.size:
                parts.append(f"size:{self.size}")
        parts.extend(_latlng_str(loc) for loc in self.locations)
        if self.location_address:
            parts.append(self.location_address)
        return "|".join(parts)


@dataclass
class Path:
    """A path of connected points overlaid on the map."""

    weight: int = 0
    color: str = ""
    fill_color: str = ""
    geodesic: bool = False
    locations: list[Any] = field(default_factory=list)

    def __str__(self) -> str:
        parts = []
        if self.color:
            parts.append(f"color:{self.color}")
        if self.fill_color:
            parts.append(f"fillcolor:{self.fill_color}")
        if self.weight:
            parts.append(f"weight:{self.weight}")
        if self.geodesic:
            parts.append("geodesic:true")
        if not self.locations:
            return "|".join(parts)

        encoded = f"enc:{_encode_polyline(self.locations)}"
        plain = [_latlng_str(loc) for loc in self.locations]
        if len("|".join(plain)) > len(encoded):
            parts.append(encoded)
        else:
            parts.extend(plain)
        return "|".join(parts)


@dataclass
class StaticMapRequest:
    """Parameters of a Maps Static API request."""

    center: str = ""
    zoom: int = 0
    size: str = ""
    scale: int = 0
    format: Format | str = ""
    language: str = ""
    region: str = ""
    map_type: MapType | str = ""
    map_id: str = ""
    markers: list[Marker] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)
    visible: list[Any] = field(default_factory=list)
    map_styles: list[str] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ValueError if the request lacks required parameters."""
        if not self.markers and not self.center and self.zoom == 0:
            raise ValueError("center and zoom required if markers empty")
        if not self.size:
            raise ValueError("size empty")

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters, each key mapped to its values."""
        query: dict[str, list[str]] = {}
        if self.center:
            query["center"] = [self.center]
        if self.zoom > 0:
            query["zoom"] = [str(self.zoom)]
        if self.size:
            query["size"] = [self.size]
        if self.scale > 0:
            query["scale"] = [str(self.scale)]
        if self.format:
            query["format"] = [str(self.format)]
        if self.language:
            query["language"] = [self.language]
        if self.region:
            query["region"] = [self.region]
        if self.map_type:
            query["maptype"] = [str(self.map_type)]
        if self.map_id:
            query["map_id"] = [self.map_id]
        if self.markers:
            query["markers"] = [str(m) for m in self.markers]
        if self.paths:
            query["path"] = [str(p) for p in self.paths]
        if self.visible:
            query["visible"] = ["|".join(_latlng_str(v) for v in self.visible)]
        if self.map_styles:
            query["style"] = list(self.map_styles)
        return query

    def encode(self) -> str:
        """Return the URL-encoded query string, keys sorted."""
        return urlencode(sorted(self.params().items()), doseq=True)


def decode_static_map(status_code: int, body: bytes) -> Image.Image:
    """Decode a Maps Static API response body into an image.

    Raises requests.HTTPError when the status is not 200.
    """
    if status_code != 200:
        text = body.decode("utf-8", errors="replace")
        raise requests.HTTPError(f"Maps Static API: {status_code} - {text}")
    image = Image.open(io.BytesIO(body))
    image.load()
    return image