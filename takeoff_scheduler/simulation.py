from dataclasses import dataclass
from typing import Optional
import logging
import numpy as np
from .event import Event, EventType
from .policies import get_policy
from .sink import EventSink, PrintSink
from .utils import read_requests, policy_number

# A logger for this file
log = logging.getLogger(__name__)


@dataclass
class ScheduleSummary:
    n_departures: int
    last_departure: Optional[int]
    "Clock time of final departure (full prioritization only)"
    mean_wait: Optional[float]
    "Mean time (minutes) between request and departure (full prioritization only)"
    max_wait: Optional[int]

    @classmethod
    def from_events(cls, events: list[Event]) -> 'ScheduleSummary':
        released = [e for e in events if e.type == EventType.RELEASED]
        waits = np.array([e.wait for e in released if e.wait is not None], dtype=int)
        if len(released) == 0 or len(waits) < len(released):
            return cls(len(released), None, None, None)
        departures = np.array([e.time for e in released], dtype=int)
        return cls(len(released), int(departures.max()), float(waits.mean()), int(waits.max()))


class Simulation:
    "Runs one prioritization policy over the takeoff requests in a file"

    def __init__(self, input_file: str, policy):
        """
        Arguments
        ---------
        input_file: path of file with one takeoff request per line, in request order
        policy: prioritization policy selector (1, 2 or 3)
        """
        self.input_file = input_file
        self.policy = policy_number(policy)

    def run(self, sink: Optional[EventSink] = None) -> list[Event]:
        # Requests are all read first so a bad file produces no output
        requests = read_requests(self.input_file, self.policy)
        if sink is None:
            sink = PrintSink(self.policy)
        log.info("Running policy %d on %d requests", self.policy, len(requests))
        return get_policy(self.policy).run(requests, sink)
