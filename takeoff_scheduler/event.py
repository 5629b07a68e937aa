from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from .priority_queue import Flight


class EventType(Enum):
    ADMITTED = 0
    RELEASED = 1


@dataclass(order=True)
class Event:
    time: int
    "Clock time (minutes) under full prioritization, otherwise position in the event stream"
    type: EventType = field(compare=False)
    flight: str = field(compare=False)
    "Name of flight"
    passengers: Optional[int] = field(compare=False, default=None)
    order: int = field(compare=False, default=-1)
    "Admission order of flight"
    request_time: Optional[int] = field(compare=False, default=None)

    @classmethod
    def from_flight(cls, tm: int, etype: EventType, flight: Flight) -> 'Event':
        return cls(tm, etype, flight.name, flight.passengers, flight.order, flight.request_time)

    @property
    def wait(self) -> Optional[int]:
        "Minutes between takeoff request and departure, if both are known"
        if self.type != EventType.RELEASED or self.request_time is None:
            return None
        return self.time - self.request_time
