# census_geocoder/__init__.py
__version__ = "0.7.0"

from .geocode import (  # noqa: E402
    CensusGeocoder,
    GeocodingError,
    GeocodingWarning,
    InvalidUsage,
    LocationQuery,
    MissingRequiredField,
    RemoteError,
    UnsupportedOperation,
)

__all__ = [
    "__version__",
    "CensusGeocoder",
    "GeocodingError",
    "GeocodingWarning",
    "InvalidUsage",
    "LocationQuery",
    "MissingRequiredField",
    "RemoteError",
    "UnsupportedOperation",
]
