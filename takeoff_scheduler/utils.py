from dataclasses import dataclass
from typing import Optional
import logging
from .clock import parse_clock
from .errors import RequestFormatError, UnsupportedPolicyError

log = logging.getLogger(__name__)

# Index of fields used by each policy in a whitespace separated request line.
# Lines look like: name origin destination H:MM passengers
NAME_FIELD = 0
TIME_FIELD = 3
PASSENGER_FIELD = 4

POLICY_FIELDS = {
    1: 1, # name only
    2: 5, # name, 3 ignored fields, passengers
    3: 5, # name, 2 ignored fields, time, passengers
}


@dataclass
class TakeoffRequest:
    name: str
    passengers: Optional[int] = None
    request_time: Optional[int] = None
    "Minutes since 12:00"


def policy_number(selector) -> int:
    "Converts a policy selector (1, 2 or 3, given as int or str) to an int"
    try:
        policy = int(selector)
    except (TypeError, ValueError):
        raise UnsupportedPolicyError(selector) from None
    if policy not in POLICY_FIELDS:
        raise UnsupportedPolicyError(selector)
    return policy


def _parse_passengers(s: str, line_no: Optional[int]) -> int:
    try:
        passengers = int(s)
    except ValueError:
        raise RequestFormatError(f"passenger count {s!r} is not an integer", line_no) from None
    if passengers < 0:
        raise RequestFormatError(f"passenger count {passengers} is negative", line_no)
    return passengers


def parse_request(line: str, policy: int, line_no: Optional[int] = None) -> TakeoffRequest:
    """
    Parses a single takeoff request line for the given policy.

    Policy 1 reads the flight name only. Policy 2 reads the name and the
    passenger count in the fifth field. Policy 3 additionally reads the
    request time ("H:MM") in the fourth field.
    """
    policy = policy_number(policy)
    fields = line.split()
    if len(fields) < POLICY_FIELDS[policy]:
        raise RequestFormatError(f"expected at least {POLICY_FIELDS[policy]} fields, got {len(fields)}", line_no)

    request = TakeoffRequest(fields[NAME_FIELD])
    if policy >= 2:
        request.passengers = _parse_passengers(fields[PASSENGER_FIELD], line_no)
    if policy == 3:
        try:
            request.request_time = parse_clock(fields[TIME_FIELD])
        except RequestFormatError as e:
            raise RequestFormatError(str(e), line_no) from None
    return request


def read_requests(data_fn: str, policy: int) -> list[TakeoffRequest]:
    """
    Reads every takeoff request from file `data_fn`.

    The whole file is parsed before anything is returned, so a malformed
    line aborts the run before any flight is scheduled. Blank lines are skipped.
    """
    policy = policy_number(policy)
    requests = []
    with open(data_fn, 'r') as f:
        for (line_no, line) in enumerate(f, start=1):
            if not line.strip():
                continue
            requests.append(parse_request(line, policy, line_no))
    log.info("Read %d takeoff requests from %s", len(requests), data_fn)
    return requests
