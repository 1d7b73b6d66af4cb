# census_geocoder/geocode/user_agents.py
from dataclasses import dataclass
from typing import Optional, Protocol

import httpx
import requests

from census_geocoder.core.config import settings

from .errors import TransportError

DEFAULT_HEADERS = {"Accept-Encoding": "gzip, deflate"}


@dataclass
class FetchResult:
    status_code: int
    reason: str
    content: bytes

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()

    @property
    def is_error(self) -> bool:
        return not 200 <= self.status_code < 300


class UserAgent(Protocol):
    def get(self, url: str) -> FetchResult: ...


# -------------------------
# requests (default)
# -------------------------
class RequestsUserAgent:
    def __init__(self, session: Optional[requests.Session] = None,
                 user_agent: Optional[str] = None, timeout: Optional[float] = None):
        if session is None:
            session = requests.Session()
            session.headers.update(DEFAULT_HEADERS)
            session.headers["User-Agent"] = user_agent or settings.user_agent
            # proxies from HTTP(S)_PROXY / NO_PROXY
            session.trust_env = True
        self.session = session
        self.timeout = timeout if timeout is not None else settings.timeout

    def get(self, url: str) -> FetchResult:
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"requests error for {url}: {e}") from e
        return FetchResult(resp.status_code, resp.reason or "", resp.content)


# -------------------------
# httpx
# -------------------------
class HttpxUserAgent:
    def __init__(self, client: Optional[httpx.Client] = None,
                 user_agent: Optional[str] = None, timeout: Optional[float] = None):
        if client is None:
            headers = dict(DEFAULT_HEADERS)
            headers["User-Agent"] = user_agent or settings.user_agent
            client = httpx.Client(
                headers=headers,
                timeout=timeout if timeout is not None else settings.timeout,
                trust_env=True,
            )
        self.client = client

    def get(self, url: str) -> FetchResult:
        try:
            resp = self.client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"httpx error for {url}: {e}") from e
        return FetchResult(resp.status_code, resp.reason_phrase or "", resp.content)

    def close(self) -> None:
        self.client.close()
