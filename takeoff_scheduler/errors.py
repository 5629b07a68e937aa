class TakeoffSchedulerError(Exception):
    "Base class for errors raised by the takeoff scheduler"


class EmptyQueueError(TakeoffSchedulerError, IndexError):
    "Raised when a flight is requested from an empty queue"


class UnsupportedPolicyError(TakeoffSchedulerError, ValueError):
    "Raised when a prioritization policy selector is not recognised"

    def __init__(self, selector):
        super().__init__(f"Unsupported prioritization policy: {selector!r} (expected 1, 2 or 3)")
        self.selector = selector


class RequestFormatError(TakeoffSchedulerError, ValueError):
    "Raised when a takeoff request line cannot be parsed"

    def __init__(self, msg: str, line_no: int | None = None):
        if line_no is not None:
            msg = f"line {line_no}: {msg}"
        super().__init__(msg)
        self.line_no = line_no
