# census_geocoder/geocode/rate_limit.py
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class RateState:
    # monotonic timestamp of the last attempted request, None before the first
    last_request: Optional[float] = None


def await_turn(
    min_interval: float,
    state: RateState,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Block until at least min_interval seconds have passed since the last request."""
    if min_interval <= 0 or state.last_request is None:
        return
    elapsed = clock() - state.last_request
    if elapsed < min_interval:
        wait = min_interval - elapsed
        logger.debug("rate limit: sleeping %.3fs", wait)
        sleep(wait)


def mark_request(state: RateState, clock: Callable[[], float] = time.monotonic) -> None:
    state.last_request = clock()
