# census_geocoder/geocode/normalize.py
import re
from typing import Union

# "<rest>, United States" / ", US" / ", USA" at the very end
_COUNTRY_SUFFIX = re.compile(r",?(.+),\s*(?:United States|US|USA)$", re.IGNORECASE)

# "<number street>, <city>, <county>, <state>"
# Street names may carry full stops (S. West Street), state names may carry
# spaces (South Carolina).
_COUNTY_SEGMENT = re.compile(
    r"^(\d+\s+[\w\s.]+),\s*([\w\s]+),\s*[\w\s]+,\s*([A-Za-z\s]+)$"
)


def to_text(raw: Union[str, bytes]) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


def strip_country(location: str) -> str:
    m = _COUNTRY_SUFFIX.match(location)
    if m:
        return m.group(1)
    return location


def drop_county(location: str) -> str:
    # The census service can't tell apart same-named towns in different
    # counties of one state, so the county adds nothing to the query.
    m = _COUNTY_SEGMENT.match(location)
    if m:
        return f"{m.group(1)}, {m.group(2)}, {m.group(3)}"
    return location


def normalize(raw: Union[str, bytes]) -> str:
    """
    Clean a raw location before it is handed to the address tokenizer.
    Never raises; strings that match none of the rules come back as-is.
    """
    location = to_text(raw)
    location = strip_country(location)
    return drop_county(location)
