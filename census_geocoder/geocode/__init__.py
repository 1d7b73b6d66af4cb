# census_geocoder/geocode/__init__.py
from .census_geocoder import CensusGeocoder, LocationQuery, resolve_location
from .errors import (
    GeocodingError,
    GeocodingWarning,
    InvalidUsage,
    MissingRequiredField,
    RemoteError,
    TransportError,
    UnsupportedOperation,
)

__all__ = [
    "CensusGeocoder",
    "LocationQuery",
    "resolve_location",
    "GeocodingError",
    "GeocodingWarning",
    "InvalidUsage",
    "MissingRequiredField",
    "RemoteError",
    "TransportError",
    "UnsupportedOperation",
]
