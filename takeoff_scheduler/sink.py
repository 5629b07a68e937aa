from typing import Protocol, TextIO
import sys
from .clock import format_clock
from .event import Event, EventType


class EventSink(Protocol):
    "Receives admission and release events as they happen"

    def __call__(self, event: Event) -> None:
        ...


def format_release(event: Event, policy: int) -> str:
    "Output line for a released flight under the given policy"
    match policy:
        case 1:
            return event.flight
        case 2:
            return f"{event.flight} {event.passengers}"
        case 3:
            return f"{event.flight} departed at {format_clock(event.time)}"
        case _:
            raise ValueError(f"No output format for policy {policy!r}")


class PrintSink:
    "Writes a line to `stream` for every flight released"

    def __init__(self, policy: int, stream: TextIO | None = None):
        self.policy = policy
        self.stream = stream

    def __call__(self, event: Event) -> None:
        if event.type == EventType.RELEASED:
            # Look up stdout at call time so that redirection (and capsys) works
            print(format_release(event, self.policy), file=self.stream or sys.stdout)


class ListSink:
    "Collects every event"

    def __init__(self):
        self.events: list[Event] = []

    def __call__(self, event: Event) -> None:
        self.events.append(event)

    def released(self) -> list[Event]:
        return [e for e in self.events if e.type == EventType.RELEASED]
