# census_geocoder/geocode/census_geocoder.py
import json
import logging
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from census_geocoder.core.config import settings

from .cache import Cache, CacheGate, default_cache
from .errors import (
    GeocodingWarning,
    InvalidUsage,
    MissingRequiredField,
    RemoteError,
    TransportError,
    UnsupportedOperation,
)
from .normalize import normalize
from .parser import StructuredAddress, parse_address
from .query import build_query, build_url
from .rate_limit import RateState, await_turn, mark_request
from .user_agents import RequestsUserAgent, UserAgent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationQuery:
    location: str


Location = Union[str, bytes, Mapping, LocationQuery]


def resolve_location(location: Any) -> Union[str, bytes]:
    """Pull the location text out of any accepted input shape."""
    if isinstance(location, (str, bytes)):
        text = location
    elif isinstance(location, Mapping):
        text = location.get("location")
    elif hasattr(location, "location"):
        text = location.location
    else:
        raise InvalidUsage()

    if not isinstance(text, (str, bytes)) or not text.strip():
        raise InvalidUsage()
    return text


class CensusGeocoder:
    """
    Geocode U.S. addresses against geocoding.geo.census.gov.

    Each instance owns its user agent, cache and rate-limit state. Calling
    geocode() on the same instance from several threads at once is not safe:
    the elapsed/sleep/update sequence around the last-request timestamp is
    not atomic. Use one instance per thread or lock around the call.
    """

    def __init__(
        self,
        ua: Optional[UserAgent] = None,
        host: Optional[str] = None,
        cache: Optional[Cache] = None,
        min_interval: Optional[float] = None,
        parser: Optional[Callable[[str], Optional[StructuredAddress]]] = None,
    ):
        self._ua = ua if ua is not None else RequestsUserAgent()
        self.host = host or settings.host
        self.cache = CacheGate(cache if cache is not None else default_cache())
        self.min_interval = min_interval if min_interval is not None else settings.min_interval
        self.parser = parser or parse_address
        self.rate_state = RateState()

    @property
    def ua(self) -> UserAgent:
        return self._ua

    @ua.setter
    def ua(self, ua: UserAgent) -> None:
        self._ua = ua

    def geocode(self, location: Location) -> Optional[Any]:
        """
        Returns the decoded JSON from the census service, or None when the
        address can't be queried or the service answered with an error.
        The reason for a None is logged at WARNING on this module's logger and
        reported via warnings.warn with a GeocodingWarning category.
        """
        location = normalize(resolve_location(location))

        structured = self.parser(location) or StructuredAddress()
        try:
            params = build_query(structured, location)
        except MissingRequiredField as w:
            self._soft_fail(w)
            return None
        url = build_url(self.host, params)

        cached = self.cache.get(location)
        if cached is not None:
            return cached

        await_turn(self.min_interval, self.rate_state)
        logger.debug("GET %s", url)
        try:
            res = self._ua.get(url)
        except TransportError as e:
            self._soft_fail(RemoteError(url, "transport error", str(e)))
            return None
        finally:
            mark_request(self.rate_state)

        if res.is_error:
            self._soft_fail(RemoteError(url, res.status_line))
            return None

        try:
            data = json.loads(res.content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            self._soft_fail(RemoteError(url, res.status_line, f"undecodable body: {e}"))
            return None
        if not isinstance(data, dict):
            self._soft_fail(RemoteError(url, res.status_line, f"unexpected body: {type(data).__name__}"))
            return None

        self.cache.set(location, data)
        return data

    def _soft_fail(self, w: GeocodingWarning) -> None:
        logger.warning("%s", w)
        warnings.warn(w, stacklevel=3)

    def reverse_geocode(self, *args, **kwargs):
        raise UnsupportedOperation(f"{type(self).__name__}: Reverse geocode is not supported")
