import json
from datetime import datetime, timezone

import pytest

from mapsapi.timezone import TimezoneRequest, TimezoneResult


def test_timezone_nevada():
    response = json.loads(
        """{
   "dstOffset" : 0,
   "rawOffset" : -28800,
   "status" : "OK",
   "timeZoneId" : "America/Los_Angeles",
   "timeZoneName" : "Pacific Standard Time"
}"""
    )
    assert TimezoneResult.from_json(response) == TimezoneResult(
        dst_offset=0,
        raw_offset=-28800,
        time_zone_id="America/Los_Angeles",
        time_zone_name="Pacific Standard Time",
    )


def test_timezone_nevada_query():
    r = TimezoneRequest(
        location=(39.6034810, -119.6822510),
        timestamp=datetime.fromtimestamp(1331161200, tz=timezone.utc),
    )
    assert r.encode() == "location=39.603481%2C-119.682251&timestamp=1331161200"


def test_timezone_location_missing():
    r = TimezoneRequest(timestamp=datetime.fromtimestamp(1331161200, tz=timezone.utc))
    with pytest.raises(ValueError, match="location missing"):
        r.validate()
    with pytest.raises(ValueError):
        r.encode()


def test_timezone_failing_server():
    with pytest.raises(ValueError, match="ERROR"):
        TimezoneResult.from_json({"status": "ERROR"})


def test_timezone_error_message_included():
    with pytest.raises(ValueError, match="REQUEST_DENIED - bad request"):
        TimezoneResult.from_json(
            {"status": "REQUEST_DENIED", "error_message": "bad request"}
        )


def test_timezone_request_url():
    r = TimezoneRequest(location=(1, 2), language="es")
    assert r.encode() == "language=es&location=1%2C2&timestamp=-62135596800"


def test_timezone_zero_results():
    assert TimezoneResult.from_json({"status": "ZERO_RESULTS"}) == TimezoneResult()


def test_location_object_with_attributes():
    class Point:
        lat = 28.0
        lng = 140.0

    r = TimezoneRequest(location=Point())
    assert r.params()["location"] == ["28,140"]