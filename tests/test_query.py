# tests/test_query.py
from urllib.parse import parse_qsl, urlsplit

import pytest

from census_geocoder.geocode.errors import MissingRequiredField
from census_geocoder.geocode.parser import StructuredAddress
from census_geocoder.geocode.query import build_query, build_url


def test_full_address():
    params = build_query(StructuredAddress(
        number="1600", street="Pennsylvania", type="Ave", suffix="NW",
        city="Washington", state="DC",
    ))
    assert list(params) == ["benchmark", "format", "city", "state", "street"]
    assert params == {
        "benchmark": "Public_AR_Current",
        "format": "json",
        "city": "Washington",
        "state": "DC",
        "street": "1600 Pennsylvania Ave NW",
    }


def test_street_without_number():
    params = build_query(StructuredAddress(street="Silver Hill", type="Rd", city="Suitland", state="MD"))
    assert params["street"] == "Silver Hill Rd"


def test_no_street_means_no_street_parameter():
    params = build_query(StructuredAddress(number="4600", city="Suitland", state="MD"))
    assert "street" not in params
    assert params["city"] == "Suitland"


@pytest.mark.parametrize("fields, missing", [
    (dict(city="Suitland"), ("state",)),
    (dict(state="MD"), ("city",)),
    (dict(street="Main", type="St"), ("city", "state")),
])
def test_missing_city_or_state(fields, missing):
    with pytest.raises(MissingRequiredField) as exc_info:
        build_query(StructuredAddress(**fields), "some place")
    assert exc_info.value.missing == missing
    assert "some place" in str(exc_info.value)


def test_url_encodes_values_and_keeps_spacing():
    params = build_query(StructuredAddress(
        number="4600", street="Silver  Hill", type="Rd.", city="St. Mary's City", state="MD",
    ))
    url = build_url("geocoding.geo.census.gov/geocoder/locations/address", params)
    parts = urlsplit(url)
    assert parts.scheme == "https"
    assert parts.netloc == "geocoding.geo.census.gov"
    assert parts.path == "/geocoder/locations/address"
    assert "'" not in parts.query
    assert dict(parse_qsl(parts.query)) == params
    assert dict(parse_qsl(parts.query))["street"] == "4600 Silver  Hill Rd."
