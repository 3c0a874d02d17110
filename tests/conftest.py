"""
Shared fixtures for the test suite.

Time is simulated: FakeClock only moves when a test (or a wait) moves it,
so recordings and playback run instantly and deterministically.
"""

import io

import pytest

from src.sequencer.models import Note, Recording


class FakeClock:
    """Virtual millisecond clock; wait_ms advances time instead of sleeping."""

    def __init__(self, start_ms=10_000):
        self.now = start_ms
        self.waits = []

    def now_ms(self):
        return self.now

    def wait_ms(self, ms):
        self.waits.append(ms)
        self.now += ms

    def advance(self, ms):
        self.now += ms


class FakeToneSink:
    """Collects (time_ms, frequency, duration_ms) for every emitted tone."""

    def __init__(self, clock=None):
        self.clock = clock
        self.tones = []

    def emit(self, frequency, duration_ms):
        at = self.clock.now_ms() if self.clock else None
        self.tones.append((at, frequency, duration_ms))

    @property
    def frequencies(self):
        return [f for _, f, _ in self.tones]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink(clock):
    return FakeToneSink(clock)


@pytest.fixture
def screen():
    return io.StringIO()


def make_recording(timestamps, name="Take 1"):
    """Build a recording of A notes at the given offsets."""
    return Recording(
        notes=tuple(Note("A", 440.0 + i, ts) for i, ts in enumerate(timestamps)),
        name=name,
    )
