# tests/conftest.py
import sys
from pathlib import Path

import pytest

# add repo root to sys.path so tests can import "census_geocoder" without installing it
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from census_geocoder.geocode.parser import StructuredAddress  # noqa: E402
from census_geocoder.geocode.user_agents import FetchResult  # noqa: E402

DUMMY_MATCH = b'{"result":{"addressMatches":[{"dummy":"match"}]}}'


# --- Helpers: mock collaborators ---
class MockUserAgent:
    """Returns the same canned response for every URL and records what was asked."""
    def __init__(self, status_code=200, reason="OK", content=DUMMY_MATCH, exc=None):
        self.status_code = status_code
        self.reason = reason
        self.content = content
        self.exc = exc
        self.urls = []

    @property
    def calls(self):
        return len(self.urls)

    def get(self, url):
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        return FetchResult(self.status_code, self.reason, self.content)


class MockCache:
    def __init__(self):
        self.store = {}
        self.get_calls = 0
        self.set_calls = 0

    def get(self, key):
        self.get_calls += 1
        return self.store.get(key)

    def set(self, key, value):
        self.set_calls += 1
        self.store[key] = value


class NullCache:
    """Never remembers anything, every geocode() goes to the network."""
    def get(self, key):
        return None

    def set(self, key, value):
        pass


def fixed_parser(**fields):
    """A tokenizer stand-in that ignores its input."""
    def parse(location):
        return StructuredAddress(**fields)
    return parse


SUITLAND = dict(number="4600", street="Silver Hill", type="Rd", city="Suitland", state="MD")


@pytest.fixture
def ua():
    return MockUserAgent()


@pytest.fixture
def cache():
    return MockCache()
