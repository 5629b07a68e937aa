import subprocess
import sys
from pathlib import Path
import pytest

LAUNCHER = Path(__file__).resolve().parent.parent / 'Takeoff_Launch.py'

REQUESTS = """AS100 SEA PDX 1:00 10
AS200 SEA LAX 1:05 50
DL300 SEA JFK 1:05 250
"""


def launch(tmp_path, *overrides):
    args = [sys.executable, str(LAUNCHER), f"hydra.run.dir='{tmp_path / 'run'}'", *overrides]
    return subprocess.run(args, cwd=tmp_path, capture_output=True, text=True)


@pytest.fixture
def request_file(tmp_path):
    fn = tmp_path / 'requests.txt'
    fn.write_text(REQUESTS)
    return fn


def test_stdout_has_only_departures(tmp_path, request_file):
    result = launch(tmp_path, f"input_file='{request_file}'", 'policy=3')
    assert result.returncode == 0, result.stderr
    assert result.stdout == ("AS100 departed at 01:01\n"
                             "DL300 departed at 01:08\n"
                             "AS200 departed at 01:09\n")


def test_unsupported_policy_exits_with_error(tmp_path, request_file):
    result = launch(tmp_path, f"input_file='{request_file}'", 'policy=7')
    assert result.returncode == 1
    assert result.stdout == ""
    assert "Unsupported prioritization policy" in result.stderr


def test_missing_file_exits_with_error(tmp_path):
    result = launch(tmp_path, f"input_file='{tmp_path / 'missing.txt'}'", 'policy=1')
    assert result.returncode == 1
    assert result.stdout == ""


def test_bad_policy_does_not_generate_file(tmp_path):
    fn = tmp_path / 'generated.txt'
    result = launch(tmp_path, f"input_file='{fn}'", 'policy=7', 'generate.enabled=true')
    assert result.returncode == 1
    assert not fn.exists()


def test_generated_requests_are_scheduled(tmp_path):
    fn = tmp_path / 'generated.txt'
    result = launch(tmp_path, f"input_file='{fn}'", 'policy=1', 'generate.enabled=true', 'generate.n_flights=5')
    assert result.returncode == 0, result.stderr
    assert result.stdout.split() == [f"FL{i:04d}" for i in range(1, 6)]
