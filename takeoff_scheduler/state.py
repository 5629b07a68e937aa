from dataclasses import dataclass, field
import logging
from .clock import RunwayClock
from .priority_queue import Flight, FlightQueue
from .utils import TakeoffRequest

log = logging.getLogger(__name__)


@dataclass
class RunwayState:
    queue: FlightQueue = field(default_factory=FlightQueue)
    "Flights waiting for the runway"
    clock: RunwayClock = field(default_factory=RunwayClock)
    "Current time (minutes since 12:00)"
    next_order: int = field(default=1)
    "Admission order given to the next flight"

    @property
    def tm(self) -> int:
        return self.clock.tm

    def flight_admitted(self, request: TakeoffRequest, key: int) -> Flight:
        flight = Flight(key, self.next_order, request.name,
                        request.passengers, request.request_time)
        self.next_order += 1
        self.queue.insert(flight)
        log.debug("Admitted %s (key %d, order %d), %d queued", flight.name, key, flight.order, len(self.queue))
        return flight

    def flight_released(self) -> Flight:
        return self.queue.extract_min()

    def num_queued(self) -> int:
        return len(self.queue)
