from takeoff_scheduler import generate_requests, write_requests, read_requests


def test_generate_requests():
    requests = generate_requests(200, seed=5, start=60, mean_gap=3, min_pax=10, max_pax=20)
    assert len(requests) == 200
    assert requests[0].request_time == 60
    times = [r.request_time for r in requests]
    assert times == sorted(times)
    assert all(t < 720 for t in times)
    assert all(10 <= r.passengers <= 20 for r in requests)
    assert len(set(r.name for r in requests)) == 200


def test_generate_is_reproducible():
    assert generate_requests(20, seed=6) == generate_requests(20, seed=6)


def test_written_requests_read_back(tmp_path):
    requests = generate_requests(30, seed=7, start=700, mean_gap=5)
    fn = str(tmp_path / 'requests.txt')
    write_requests(fn, requests, seed=7)
    assert read_requests(fn, 3) == requests
    assert [r.name for r in read_requests(fn, 1)] == [r.name for r in requests]
