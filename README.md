# mapsapi

Request builders and response types for map web services. The package
covers static map images, time zone lookups, place types and place field
masks. It builds query strings and reads responses. Static map images are
decoded with Pillow. A `requests` adapter tags outgoing requests with the
package's User-Agent token.

## Installation

```
pip install mapsapi
```

To run the tests:

```
pip install "mapsapi[test]"
pytest
```

## Modules

- `mapsapi.types` holds string enumerations: `Mode`, `Avoid`, `Units`,
  `TransitMode`, `TransitRoutingPreference`, `TrafficModel`, `PriceLevel`,
  `Component` and `RankBy`. Calling `str()` on a member gives its wire value.
  The module also holds the response records `Distance`, `OpeningHours`,
  `OpeningHoursPeriod`, `OpeningHoursOpenClose`, `Photo` and
  `PlaceEditorialSummary`. Each record has a `from_json` class method that
  builds it from a decoded JSON object. Missing fields get empty defaults.
- `mapsapi.placetypes` holds `PlaceType` and `AutocompletePlaceType`.
  `parse_place_type` and `parse_autocomplete_place_type` read these from
  strings. The match ignores case, and an unknown name raises `ValueError`.
- `mapsapi.fieldmasks` holds `PlaceDetailsFieldMask` and
  `PlaceSearchFieldMask`. It has the case-insensitive parsers
  `parse_place_details_field_mask` and `parse_place_search_field_mask`.
  `field_masks_as_strings` turns a sequence of masks into their wire values.
- `mapsapi.staticmap` holds `StaticMapRequest`, `Marker`, `CustomIcon` and
  `Path`, and the enumerations `MapType`, `Format`, `MarkerSize` and
  `Anchor`. `decode_static_map` turns a response status and body into a
  Pillow image.
- `mapsapi.timezone` holds `TimezoneRequest` and `TimezoneResult`.
- `mapsapi.transport` holds `UserAgentAdapter`, `user_agent` and
  `apply_user_agent`.

You can give a location as a `(lat, lng)` pair or as any object with `lat`
and `lng` attributes. Coordinates are written in their shortest decimal form,
such as `3.1225951401,101.6404967928`.

## Static maps

```python
import requests
from mapsapi.staticmap import StaticMapRequest, Marker, MapType, decode_static_map
from mapsapi.transport import UserAgentAdapter

request = StaticMapRequest(
    center="Brooklyn Bridge,New York,NY",
    zoom=13,
    size="600x300",
    scale=2,
    map_type=MapType.ROADMAP,
    markers=[Marker(color="red", label="A", location_address="Brooklyn Bridge")],
)
request.validate()

session = requests.Session()
session.mount("https://", UserAgentAdapter())
query = request.encode() + "&key=placeholder"
resp = session.get("https://maps.example.com/maps/api/staticmap?" + query)
image = decode_static_map(resp.status_code, resp.content)
print(image.size)
```

`validate()` raises `ValueError` in two cases: when `size` is empty, or when
there are no markers and neither `center` nor `zoom` is set.

`params()` returns a dict that maps each query key to a list of values.
`encode()` returns the URL-encoded query string with the keys sorted.

Each marker and each path becomes one `markers` or `path` value. When a
marker has a non-empty `custom_icon`, the icon replaces the marker's colour,
label and size. A path's points are written as plain `lat,lng` pairs, or as
an `enc:` encoded polyline when that form is shorter.

`decode_static_map` raises `requests.HTTPError` for any status other than 200.
The error message includes the response body.

## Time zones

```python
from datetime import datetime, timezone
from mapsapi.timezone import TimezoneRequest, TimezoneResult

request = TimezoneRequest(
    location=(39.6034810, -119.6822510),
    timestamp=datetime.fromtimestamp(1331161200, tz=timezone.utc),
    language="es",
)
print(request.encode())
# language=es&location=39.603481,-119.682251&timestamp=1331161200

result = TimezoneResult.from_json({
    "status": "OK",
    "dstOffset": 0,
    "rawOffset": -28800,
    "timeZoneId": "America/Los_Angeles",
    "timeZoneName": "Pacific Standard Time",
})
print(result.time_zone_id)
```

`params()` and `encode()` raise `ValueError` when `location` is missing. If
no timestamp is given, the request sends `-62135596800`, which is the start
of year 1 in UTC.

`TimezoneResult.from_json` accepts the statuses `OK` and `ZERO_RESULTS`. For
`ZERO_RESULTS` it returns an empty result. For any other status it raises
`ValueError` with the status and any `error_message`.

## User-Agent

`UserAgentAdapter` is a `requests` adapter. It appends
`GoogleGeoApiClientPython/0.1` to each request's `User-Agent` header,
separated by `;`. If the header is empty, the token is used on its own.

The adapter can wrap another adapter and send through it. If the wrapped
adapter is itself a `UserAgentAdapter`, it is unwrapped, so the token is
never added twice.

`apply_user_agent` returns a tagged copy of a prepared request and leaves
the original unchanged.

## Parsing enumerations

```python
from mapsapi.placetypes import parse_place_type
from mapsapi.fieldmasks import parse_place_details_field_mask, field_masks_as_strings

parse_place_type("Cafe")                      # PlaceType.CAFE
fields = [parse_place_details_field_mask(f) for f in ("name", "geometry/location")]
field_masks_as_strings(fields)                # ["name", "geometry/location"]
```

## What the package does not do

There is no client object that talks to the services for you. The package
does not hold or add API keys, sign URLs, retry requests or limit request
rates. The caller sends each request, for example with a `requests.Session`
that has `UserAgentAdapter` mounted. The caller then passes the response to
`decode_static_map` or `TimezoneResult.from_json`. The package has no
command-line program.