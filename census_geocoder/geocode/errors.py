# census_geocoder/geocode/errors.py
from typing import Optional


# -------------------------
# Hard failures: raised, interrupt the caller
# -------------------------
class GeocodingError(RuntimeError):
    pass


class InvalidUsage(GeocodingError, ValueError):
    def __init__(self, message: str = "Usage: geocode(location=<location>)"):
        super().__init__(message)


class UnsupportedOperation(GeocodingError, NotImplementedError):
    pass


class TransportError(GeocodingError):
    """The user agent could not complete the request (DNS, TLS, timeout, ...)."""


# -------------------------
# Soft failures: reported through warnings.warn, geocode() returns None
# -------------------------
class GeocodingWarning(UserWarning):
    pass


class MissingRequiredField(GeocodingWarning):
    def __init__(self, location: str, missing=("city", "state")):
        self.location = location
        self.missing = tuple(missing)
        super().__init__(f"city and state are mandatory ({location})")


class RemoteError(GeocodingWarning):
    def __init__(self, url: str, status_line: str, detail: Optional[str] = None):
        self.url = url
        self.status_line = status_line
        self.detail = detail
        message = f"{url} API returned error: {status_line}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
