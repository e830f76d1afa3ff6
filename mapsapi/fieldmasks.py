"""Field masks selecting which fields Place Details and Place Search return."""

from __future__ import annotations

from typing import Iterable

from .types import _StrEnum


class PlaceDetailsFieldMask(_StrEnum):
    """A field to return with a Place Details request."""

    ADDRESS_COMPONENT = "address_component"
    ADR_ADDRESS = "adr_address"
    BUSINESS_STATUS = "business_status"
    CURBSIDE_PICKUP = "curbside_pickup"
    DELIVERY = "delivery"
    DINE_IN = "dine_in"
    EDITORIAL_SUMMARY = "editorial_summary"
    FORMATTED_ADDRESS = "formatted_address"
    FORMATTED_PHONE_NUMBER = "formatted_phone_number"
    GEOMETRY = "geometry"
    GEOMETRY_LOCATION = "geometry/location"
    GEOMETRY_LOCATION_LAT = "geometry/location/lat"
    GEOMETRY_LOCATION_LNG = "geometry/location/lng"
    GEOMETRY_VIEWPORT = "geometry/viewport"
    GEOMETRY_VIEWPORT_NORTHEAST = "geometry/viewport/northeast"
    GEOMETRY_VIEWPORT_NORTHEAST_LAT = "geometry/viewport/northeast/lat"
    GEOMETRY_VIEWPORT_NORTHEAST_LNG = "geometry/viewport/northeast/lng"
    GEOMETRY_VIEWPORT_SOUTHWEST = "geometry/viewport/southwest"
    GEOMETRY_VIEWPORT_SOUTHWEST_LAT = "geometry/viewport/southwest/lat"
    GEOMETRY_VIEWPORT_SOUTHWEST_LNG = "geometry/viewport/southwest/lng"
    ICON = "icon"
    ID = "id"
    INTERNATIONAL_PHONE_NUMBER = "international_phone_number"
    NAME = "name"
    OPENING_HOURS = "opening_hours"
    CURRENT_OPENING_HOURS = "current_opening_hours"
    SECONDARY_OPENING_HOURS = "secondary_opening_hours"
    PERMANENTLY_CLOSED = "permanently_closed"
    PHOTOS = "photos"
    PLACE_ID = "place_id"
    PRICE_LEVEL = "price_level"
    RATINGS = "rating"
    USER_RATINGS_TOTAL = "user_ratings_total"
    RESERVABLE = "reservable"
    REVIEWS = "reviews"
    SERVES_BEER = "serves_beer"
    SERVES_BREAKFAST = "serves_breakfast"
    SERVES_BRUNCH = "serves_brunch"
    SERVES_DINNER = "serves_dinner"
    SERVES_LUNCH = "serves_lunch"
    SERVES_VEGETARIAN_FOOD = "serves_vegetarian_food"
    SERVES_WINE = "serves_wine"
    TAKEOUT = "takeout"
    TYPES = "types"
    URL = "url"
    UTC_OFFSET = "utc_offset"
    VICINITY = "vicinity"
    WEBSITE = "website"
    WHEELCHAIR_ACCESSIBLE_ENTRANCE = "wheelchair_accessible_entrance"


class PlaceSearchFieldMask(_StrEnum):
    """A field to return with a Place Search request."""

    BUSINESS_STATUS = "business_status"
    FORMATTED_ADDRESS = "formatted_address"
    GEOMETRY = "geometry"
    GEOMETRY_LOCATION = "geometry/location"
    GEOMETRY_LOCATION_LAT = "geometry/location/lat"
    GEOMETRY_LOCATION_LNG = "geometry/location/lng"
    GEOMETRY_VIEWPORT = "geometry/viewport"
    GEOMETRY_VIEWPORT_NORTHEAST = "geometry/viewport/northeast"
    GEOMETRY_VIEWPORT_NORTHEAST_LAT = "geometry/viewport/northeast/lat"
    GEOMETRY_VIEWPORT_NORTHEAST_LNG = "geometry/viewport/northeast/lng"
    GEOMETRY_VIEWPORT_SOUTHWEST = "geometry/viewport/southwest"
    GEOMETRY_VIEWPORT_SOUTHWEST_LAT = "geometry/viewport/southwest/lat"
    GEOMETRY_VIEWPORT_SOUTHWEST_LNG = "geometry/viewport/southwest/lng"
    ICON = "icon"
    ID = "id"
    NAME = "name"
    OPENING_HOURS = "opening_hours"
    OPENING_HOURS_OPEN_NOW = "opening_hours/open_now"
    PERMANENTLY_CLOSED = "permanently_closed"
    PHOTOS = "photos"
    PLACE_ID = "place_id"
    PRICE_LEVEL = "price_level"
    RATING = "rating"
    USER_RATINGS_TOTAL = "user_ratings_total"
    REFERENCE = "reference"
    TYPES = "types"
    VICINITY = "vicinity"


def parse_place_details_field_mask(field_mask: str) -> PlaceDetailsFieldMask:
    """Parse a Place Details field mask name, ignoring case.

    Raises ValueError for an unknown name.
    """
    try:
        return PlaceDetailsFieldMask(field_mask.lower())
    except ValueError:
        raise ValueError(f'Unknown PlaceDetailsFieldMask "{field_mask}"') from None


def parse_place_search_field_mask(field_mask: str) -> PlaceSearchFieldMask:
    """Parse a Place Search field mask name, ignoring case.

    Raises ValueError for an unknown name.
    """
    try:
        return PlaceSearchFieldMask(field_mask.lower())
    except ValueError:
        raise ValueError(f'Unknown PlaceSearchFieldMask "{field_mask}"') from None


def field_masks_as_strings(
    fields: Iterable[PlaceDetailsFieldMask | PlaceSearchFieldMask],
) -> list[str]:
    """Return the wire values of the given field masks, in order."""
    return [str(f) for f in fields]