# census_geocoder/geocode/parser.py
import logging
from dataclasses import dataclass
from typing import Optional

import usaddress

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructuredAddress:
    number: Optional[str] = None
    street: Optional[str] = None
    type: Optional[str] = None
    suffix: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None


# usaddress labels folded into the street name, in reading order.
# "N Main St" keeps its "N", "Avenue of the Americas" keeps its "Avenue".
_STREET_LABELS = (
    "StreetNamePreDirectional",
    "StreetNamePreModifier",
    "StreetNamePreType",
    "StreetName",
)


def _join(tags, labels) -> Optional[str]:
    parts = [tags[label] for label in labels if tags.get(label)]
    return " ".join(parts) or None


def _first_runs(parsed) -> dict:
    # usaddress.tag() gives up when a label repeats ("Apt 5 Apt 6"); keep the
    # first run of tokens for each label instead
    runs, open_label = {}, None
    for token, label in parsed:
        if label == open_label:
            runs[label].append(token)
        elif label not in runs:
            runs[label] = [token]
            open_label = label
        else:
            open_label = None
    return {label: " ".join(tokens).strip(" ,;") for label, tokens in runs.items()}


def parse_address(location: str) -> Optional[StructuredAddress]:
    """
    Split a normalized location into its street/city/state components.
    Returns None when usaddress cannot make sense of the string.
    """
    try:
        tags, _address_type = usaddress.tag(location)
    except usaddress.RepeatedLabelError as e:
        logger.debug("repeated label %s in %r, using first occurrences", e.repeated_label, location)
        tags = _first_runs(e.parsed_string)
    if not tags:
        return None

    return StructuredAddress(
        number=tags.get("AddressNumber") or None,
        street=_join(tags, _STREET_LABELS),
        type=tags.get("StreetNamePostType") or None,
        suffix=tags.get("StreetNamePostDirectional") or None,
        city=tags.get("PlaceName") or None,
        state=tags.get("StateName") or None,
    )
