import os
import sys

import pytest

# Charts are rendered off-screen during tests
os.environ.setdefault("MPLBACKEND", "Agg")


def pytest_sessionstart(session):
    # Ensure project root is on sys.path so 'batch_scheduler' can be imported
    here = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.abspath(os.path.join(here, os.pardir, os.pardir))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


@pytest.fixture
def sample_specs():
    """The three-process example: (name, size_kb, burst_time, priority)."""
    return [
        ("editor", 120, 50, 3),
        ("compiler", 400, 20, 1),
        ("backup", 900, 80, 2),
    ]


@pytest.fixture
def populated_session(sample_specs):
    """A full session built from ``sample_specs`` with pids 1..3."""
    from batch_scheduler.backend.session import create_session

    session = create_session(len(sample_specs))
    for pid, (name, size, burst, priority) in enumerate(sample_specs, start=1):
        session.insert(pid, name, size, burst, priority)
    return session
