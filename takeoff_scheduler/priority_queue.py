from dataclasses import dataclass, field
from typing import Iterator, Optional
import logging
from .errors import EmptyQueueError

log = logging.getLogger(__name__)


def passenger_key(passengers: int) -> int:
    """Priority key for flights prioritized by passenger count.

    The queue releases the smallest key first, so the count is negated
    to release flights with more passengers first.
    """
    return -passengers


@dataclass(order=True)
class Flight:
    key: int
    "Priority key, smaller keys are released first"
    order: int
    "Admission sequence number, breaks ties between equal keys"
    name: str = field(compare=False)
    passengers: Optional[int] = field(compare=False, default=None)
    request_time: Optional[int] = field(compare=False, default=None)
    "Time (minutes) at which takeoff was requested, if known"


class FlightQueue:
    """
    Stable priority queue of flights, implemented as a binary min-heap.

    Flights are ordered by (key, order), so flights with equal keys leave
    the queue in the order in which they were admitted. The heap is stored
    1-indexed: slot 0 is unused, the children of slot i are 2i and 2i + 1
    and its parent is i // 2.
    """

    def __init__(self):
        self.heap: list[Optional[Flight]] = [None]

    def __len__(self) -> int:
        return len(self.heap) - 1

    def __bool__(self) -> bool:
        return len(self) > 0

    def is_empty(self) -> bool:
        return len(self) == 0

    def insert(self, flight: Flight):
        "Add flight as a new leaf and sift it up to restore the heap property"
        heap = self.heap
        heap.append(flight)
        i = len(heap) - 1
        while i > 1 and heap[i] < heap[i // 2]:
            parent = i // 2
            heap[i], heap[parent] = heap[parent], heap[i]
            i = parent

    def peek(self) -> Flight:
        if self.is_empty():
            raise EmptyQueueError("peek at empty flight queue")
        return self.heap[1]

    def extract_min(self) -> Flight:
        """Removes and returns the flight with smallest (key, order).

        Raises EmptyQueueError if there are no flights in the queue.
        """
        if self.is_empty():
            raise EmptyQueueError("extract from empty flight queue")
        heap = self.heap
        top = heap[1]
        last = heap.pop()
        if len(heap) > 1:
            heap[1] = last
            i = 1
            child = self._smaller_child(i)
            while child is not None and heap[child] < heap[i]:
                heap[i], heap[child] = heap[child], heap[i]
                i = child
                child = self._smaller_child(i)
        return top

    def drain(self) -> Iterator[Flight]:
        "Yields flights in release order until the queue is empty"
        while self:
            yield self.extract_min()

    def _smaller_child(self, i: int) -> Optional[int]:
        """Index of the smaller child of slot i, or None if it is a leaf.

        If both children compare equal the left one is returned, although
        distinct admission orders mean this cannot happen in practice.
        """
        left, right = 2 * i, 2 * i + 1
        n = len(self.heap)
        if left >= n:
            return None
        if right < n and self.heap[right] < self.heap[left]:
            return right
        return left

    def check_heap(self) -> bool:
        "True if every flight is ordered at or after its parent"
        heap = self.heap
        ok = all(not heap[i] < heap[i // 2] for i in range(2, len(heap)))
        if not ok:
            log.debug("Heap property violated: %s", heap[1:])
        return ok

    def __repr__(self):
        return f"FlightQueue({[f.name for f in self.heap[1:]]})"
