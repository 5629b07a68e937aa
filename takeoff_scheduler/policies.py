from typing import Iterable, Optional, Protocol
import logging
from .clock import takeoff_duration, format_clock
from .event import Event, EventType
from .priority_queue import passenger_key
from .sink import EventSink
from .state import RunwayState
from .utils import TakeoffRequest, policy_number

log = logging.getLogger(__name__)


class PrioritizationPolicy(Protocol):
    """Function object which decides the order in which takeoff requests are released."""

    def run(self, requests: Iterable[TakeoffRequest], sink: Optional[EventSink] = None) -> list[Event]:
        """
        Schedules all `requests` (in the order given) and drains the queue.

        Each event is passed to `sink` as it happens and all events are returned.
        """


class _QueuePolicy:
    """Admits every request straight into the queue and releases them once input is exhausted.

    Subclasses must override `priority_key`, which gives the key each request is queued with.
    """

    def priority_key(self, request: TakeoffRequest) -> int:
        raise NotImplementedError

    def run(self, requests: Iterable[TakeoffRequest], sink: Optional[EventSink] = None) -> list[Event]:
        state = RunwayState()
        events = []

        def emit(etype, flight):
            event = Event.from_flight(len(events), etype, flight)
            events.append(event)
            if sink is not None:
                sink(event)

        for request in requests:
            flight = state.flight_admitted(request, self.priority_key(request))
            emit(EventType.ADMITTED, flight)
        while state.num_queued() > 0:
            flight = state.flight_released()
            log.info("Released %s", flight.name)
            emit(EventType.RELEASED, flight)
        return events


class SimplePrioritization(_QueuePolicy):
    "First come, first served: flights take off in the order requests were made"

    def priority_key(self, request: TakeoffRequest) -> int:
        return 0


class IntermediatePrioritization(_QueuePolicy):
    """Flights with more passengers take off first.

    Flights with the same passenger count take off in the order requests were made.
    """

    def priority_key(self, request: TakeoffRequest) -> int:
        return passenger_key(request.passengers)


class FullPrioritization:
    """
    Releases flights whenever the runway is free, prioritizing queued flights by passenger count.

    The runway clock starts at 0 (12:00). Before each request is admitted,
    queued flights are released one at a time while the clock is behind the
    request time; each takeoff moves the clock on by its duration and may
    take it past the request time. If the queue empties first the clock
    jumps straight to the request time. Once all requests are admitted the
    remaining backlog is released.
    """

    def run(self, requests: Iterable[TakeoffRequest], sink: Optional[EventSink] = None) -> list[Event]:
        state = RunwayState()
        events = []

        def emit(event):
            events.append(event)
            if sink is not None:
                sink(event)

        for request in requests:
            while request.request_time > state.tm:
                if state.num_queued() > 0:
                    emit(self.release_flight(state))
                else:
                    state.clock.advance_to(request.request_time)

            flight = state.flight_admitted(request, passenger_key(request.passengers))
            emit(Event.from_flight(state.tm, EventType.ADMITTED, flight))

        # Clear backlog of unreleased flights
        while state.num_queued() > 0:
            emit(self.release_flight(state))
        return events

    @staticmethod
    def release_flight(state: RunwayState) -> Event:
        "Releases the next flight for takeoff and moves the clock to its departure time"
        flight = state.flight_released()
        departure = state.clock.advance_by(takeoff_duration(flight.passengers))
        log.info("Flight %s departed at %s (requested %s, %d queued)", flight.name,
                 format_clock(departure), format_clock(flight.request_time), state.num_queued())
        return Event.from_flight(departure, EventType.RELEASED, flight)


POLICIES = {
    1: SimplePrioritization,
    2: IntermediatePrioritization,
    3: FullPrioritization,
}


def get_policy(selector) -> PrioritizationPolicy:
    "Returns policy for selector 1, 2 or 3; raises UnsupportedPolicyError otherwise"
    return POLICIES[policy_number(selector)]()
