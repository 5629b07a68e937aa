import random
import pytest
from takeoff_scheduler import Flight, FlightQueue, EmptyQueueError, passenger_key


def make_queue(keys):
    queue = FlightQueue()
    for (order, key) in enumerate(keys, start=1):
        queue.insert(Flight(key, order, f"F{order}"))
    return queue


def test_heap_property_random_operations():
    random.seed(0)
    queue = FlightQueue()
    order = 1
    for i in range(500):
        if queue and random.random() < 0.4:
            queue.extract_min()
        else:
            queue.insert(Flight(random.randint(-5, 5), order, f"F{order}"))
            order += 1
        assert queue.check_heap()


def test_extract_in_key_then_order():
    random.seed(1)
    for i in range(5):
        keys = [random.randint(-3, 3) for j in range(40)]
        queue = make_queue(keys)
        out = [(f.key, f.order) for f in queue.drain()]
        assert out == sorted(out)
        assert len(out) == len(keys)
        assert queue.is_empty()


def test_equal_keys_leave_in_admission_order():
    queue = make_queue([7] * 10)
    assert [f.order for f in queue.drain()] == list(range(1, 11))


def test_passenger_key_releases_larger_flights_first():
    queue = FlightQueue()
    for (order, (name, pax)) in enumerate([('A', 3), ('B', 5), ('C', 5)], start=1):
        queue.insert(Flight(passenger_key(pax), order, name, pax))
    assert [f.name for f in queue.drain()] == ['B', 'C', 'A']


def test_comparison_ignores_name():
    assert Flight(1, 1, 'Z') < Flight(1, 2, 'A')
    assert Flight(0, 5, 'Z') < Flight(1, 1, 'A')


def test_len_and_peek():
    queue = make_queue([3, 1, 2])
    assert len(queue) == 3
    assert queue.peek().key == 1
    assert len(queue) == 3
    assert queue.extract_min().key == 1
    assert len(queue) == 2


def test_empty_queue():
    queue = FlightQueue()
    assert queue.is_empty()
    assert not queue
    with pytest.raises(EmptyQueueError):
        queue.extract_min()
    with pytest.raises(EmptyQueueError):
        queue.peek()
    queue.insert(Flight(0, 1, 'A'))
    queue.extract_min()
    with pytest.raises(IndexError):
        queue.extract_min()
