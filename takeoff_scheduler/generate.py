from typing import Optional
import logging
import numpy as np
from .clock import WINDOW, format_clock
from .utils import TakeoffRequest

log = logging.getLogger(__name__)

ORIGIN = 'SEA'
DESTINATIONS = ['PDX', 'SFO', 'LAX', 'DEN', 'ORD', 'JFK', 'ANC', 'HNL', 'YVR', 'PHX']


def generate_requests(n: int, seed: Optional[int] = None, start: int = 0, mean_gap: float = 2.0,
                      min_pax: int = 20, max_pax: int = 300) -> list[TakeoffRequest]:
    """
    Generates a random stream of `n` takeoff requests in request order.

    Arguments
    ---------
    n: number of requests
    seed: seed for numpy random generator
    start: time (minutes since 12:00) of first request
    mean_gap: mean of exponentially distributed time between requests (minutes)
    min_pax, max_pax: passenger counts are uniform on [min_pax, max_pax]
    """
    if not 0 <= start < WINDOW:
        raise ValueError(f"start must lie in [0, {WINDOW}), got {start}")
    if not 0 <= min_pax <= max_pax:
        raise ValueError(f"invalid passenger range [{min_pax}, {max_pax}]")
    rng = np.random.default_rng(seed)
    gaps = np.rint(rng.exponential(mean_gap, size=n)).astype(int)
    gaps[:1] = 0 # first request at start
    # All requests must fall within the 12 hour clock window
    times = np.minimum(start + np.cumsum(gaps), WINDOW - 1)
    pax = rng.integers(min_pax, max_pax, size=n, endpoint=True)
    log.info("Generated %d requests between %s and %s", n, format_clock(start),
             format_clock(int(times[-1])) if n else format_clock(start))
    return [TakeoffRequest(f"FL{i + 1:04d}", int(p), int(t)) for (i, (t, p)) in enumerate(zip(times, pax))]


def write_requests(data_fn: str, requests: list[TakeoffRequest], seed: Optional[int] = None):
    """
    Writes requests to file `data_fn`, one per line, as
    "name origin destination H:MM passengers".
    """
    rng = np.random.default_rng(seed)
    with open(data_fn, 'w') as f:
        for request in requests:
            dest = DESTINATIONS[rng.integers(len(DESTINATIONS))]
            f.write(f"{request.name} {ORIGIN} {dest} {format_clock(request.request_time)} {request.passengers}\n")
