import pytest

from mapsapi.placetypes import (
    AutocompletePlaceType,
    PlaceType,
    parse_autocomplete_place_type,
    parse_place_type,
)


@pytest.mark.parametrize("member", list(PlaceType))
def test_parse_place_type_round_trip(member):
    assert parse_place_type(str(member)) is member


@pytest.mark.parametrize("member", list(PlaceType))
def test_parse_place_type_ignores_case(member):
    assert parse_place_type(member.value.upper()) is member


def test_parse_place_type_pinned_values():
    assert parse_place_type("accounting") is PlaceType.ACCOUNTING
    assert parse_place_type("local_government_office") is PlaceType.LOCAL_GOVERNMENT_OFFICE
    assert parse_place_type("Zoo") is PlaceType.ZOO


def test_parsed_place_type_str_is_wire_value():
    assert str(parse_place_type("RV_PARK")) == "rv_park"
    assert f"{parse_place_type('Art_Gallery')}" == "art_gallery"


def test_every_place_type_parses_to_a_distinct_member():
    parsed = {parse_place_type(m.value) for m in PlaceType}
    assert len(parsed) == 96
    assert parsed == set(PlaceType)


@pytest.mark.parametrize("bad", ["", "spaceport", "art gallery", "(cities)"])
def test_parse_place_type_unknown(bad):
    with pytest.raises(ValueError) as excinfo:
        parse_place_type(bad)
    assert str(excinfo.value) == f'Unknown PlaceType "{bad}"'


@pytest.mark.parametrize("member", list(AutocompletePlaceType))
def test_parse_autocomplete_place_type_round_trip(member):
    assert parse_autocomplete_place_type(str(member)) is member
    assert parse_autocomplete_place_type(member.value.upper()) is member


def test_parse_autocomplete_place_type_pinned_values():
    assert parse_autocomplete_place_type("(regions)") is AutocompletePlaceType.REGIONS
    assert parse_autocomplete_place_type("(Cities)") is AutocompletePlaceType.CITIES
    assert parse_autocomplete_place_type("Geocode") is AutocompletePlaceType.GEOCODE


@pytest.mark.parametrize("bad", ["cities", "regions", "bank", ""])
def test_parse_autocomplete_place_type_unknown(bad):
    with pytest.raises(ValueError) as excinfo:
        parse_autocomplete_place_type(bad)
    assert str(excinfo.value) == f'Unknown AutocompletePlaceType "{bad}"'


def test_error_message_keeps_original_case():
    with pytest.raises(ValueError, match='"NoSuchType"'):
        parse_place_type("NoSuchType")