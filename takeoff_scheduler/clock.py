import math
from .errors import RequestFormatError

# All times are minutes since 12:00 within a single 12 hour window (no AM/PM)
MINUTES_PER_HOUR = 60
HOURS_PER_WINDOW = 12
WINDOW = MINUTES_PER_HOUR * HOURS_PER_WINDOW


def parse_clock(s: str) -> int:
    """
    Converts a time in "H:MM" format to minutes since 12:00.

    The hour is taken modulo 12, so "12:30" is 30 minutes and "1:05" is 65.
    """
    hour, sep, minute = s.partition(':')
    if not sep:
        raise RequestFormatError(f"time {s!r} is not in H:MM format")
    try:
        hour, minute = int(hour), int(minute)
    except ValueError:
        raise RequestFormatError(f"time {s!r} is not in H:MM format") from None
    if hour < 0 or minute < 0:
        raise RequestFormatError(f"time {s!r} has a negative component")
    return hour % HOURS_PER_WINDOW * MINUTES_PER_HOUR + minute


def format_clock(minutes: int) -> str:
    "Converts minutes since 12:00 to a zero-padded HH:MM string (0 minutes is 12:00)"
    hour = ((minutes // MINUTES_PER_HOUR) + HOURS_PER_WINDOW - 1) % HOURS_PER_WINDOW + 1
    minute = minutes % MINUTES_PER_HOUR
    return f"{hour:02d}:{minute:02d}"


def takeoff_duration(passenger_count: int) -> int:
    """
    Time (minutes) a flight occupies the runway, based on its passenger count.

    Integer division is used throughout, which means the result is
    ceil(passenger_count // 2 / 60): 0 for fewer than two passengers and
    1 minute for anything up to 121 passengers.
    """
    if passenger_count < 0:
        raise ValueError(f"passenger count must be non-negative, got {passenger_count}")
    half = passenger_count // 2
    return (half // MINUTES_PER_HOUR) + math.ceil((half % MINUTES_PER_HOUR) / MINUTES_PER_HOUR)


class RunwayClock:
    "Simulated runway clock which only moves forward"

    def __init__(self, tm: int = 0):
        """
        Arguments
        ---------
        tm: starting time in minutes since 12:00
        """
        self.tm = tm

    def advance_to(self, tm: int) -> int:
        "Fast-forward clock to `tm` (e.g. runway idle until next request)"
        if tm < self.tm:
            raise ValueError(f"clock cannot move backwards from {self.tm} to {tm}")
        self.tm = tm
        return self.tm

    def advance_by(self, duration: int) -> int:
        "Move clock forward by `duration` minutes and return the new time"
        return self.advance_to(self.tm + duration)

    def __str__(self):
        return format_clock(self.tm)

    def __repr__(self):
        return f"RunwayClock(tm={self.tm})"
