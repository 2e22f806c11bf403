"""
Shared fixtures for Squares Canvas tests.

Provides fresh state machines, stores, and a snapshot recorder.
"""
import os
import sys

import pytest

# Widgets must be creatable without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from squares_canvas.core import DragStateMachine, Point, StartDrag, Move, EndDrag


class SnapshotRecorder:
    """Observer that keeps every snapshot it receives."""

    def __init__(self):
        self.snapshots = []

    def __call__(self, snapshot):
        self.snapshots.append(snapshot)

    @property
    def last(self):
        return self.snapshots[-1]

    def __len__(self):
        return len(self.snapshots)


def draw(machine, start, end, via=None):
    """Run one full gesture from start to end, optionally moving through via."""
    machine.submit(StartDrag(Point(*start)))
    for point in via or [end]:
        machine.submit(Move(Point(*point)))
    return machine.submit(EndDrag(Point(*end)))


@pytest.fixture
def machine():
    """Fresh state machine with its own store"""
    return DragStateMachine()


@pytest.fixture
def recorder():
    """Snapshot-collecting observer"""
    return SnapshotRecorder()


@pytest.fixture
def recorded_machine(machine, recorder):
    """State machine with a recorder subscribed (initial replay already recorded)"""
    machine.subscribe(recorder)
    return machine


@pytest.fixture
def gesture():
    """Helper running a full StartDrag/Move/EndDrag gesture"""
    return draw
