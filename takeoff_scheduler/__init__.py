from .errors import TakeoffSchedulerError, EmptyQueueError, UnsupportedPolicyError, RequestFormatError
from .clock import parse_clock, format_clock, takeoff_duration, RunwayClock
from .priority_queue import Flight, FlightQueue, passenger_key
from .utils import TakeoffRequest, parse_request, read_requests, policy_number
from .state import RunwayState
from .event import Event, EventType
from .sink import EventSink, PrintSink, ListSink, format_release
from .policies import PrioritizationPolicy, SimplePrioritization, IntermediatePrioritization, FullPrioritization, get_policy
from .simulation import Simulation, ScheduleSummary
from .generate import generate_requests, write_requests
