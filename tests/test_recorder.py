"""
Tests for src/sequencer/recorder.py: the Idle/Active recording state machine.
"""

import dataclasses

import pytest

from src.sequencer.models import Note
from src.sequencer.recorder import RecordingSession


@pytest.fixture
def session(clock):
    return RecordingSession(clock)


class TestStateTransitions:
    def test_starts_idle_with_empty_recording(self, session):
        assert not session.is_active
        assert len(session.last_recording) == 0

    def test_start_then_stop(self, session):
        session.start()
        assert session.is_active
        session.stop()
        assert not session.is_active

    def test_start_while_active_keeps_buffer_and_start_time(self, session, clock):
        session.start()
        clock.advance(100)
        session.record("C", 261.63)
        clock.advance(100)
        session.start()
        session.record("D", 293.66)
        session.stop()
        assert [n.timestamp_ms for n in session.last_recording] == [100, 200]

    def test_stop_while_idle_is_noop(self, session):
        session.stop()
        assert not session.is_active
        assert len(session.last_recording) == 0


class TestRecord:
    def test_round_trip_timestamps(self, session, clock):
        session.start()
        session.record("C", 261.63)
        clock.advance(500)
        session.record("E", 329.63)
        session.stop()

        recording = session.last_recording
        assert list(recording) == [
            Note("C", 261.63, 0),
            Note("E", 329.63, 500),
        ]

    def test_timestamps_relative_to_start(self, session, clock):
        clock.advance(12_345)
        session.start()
        clock.advance(40)
        session.record("A", 440.0)
        session.stop()
        assert session.last_recording.notes[0].timestamp_ms == 40

    def test_record_while_idle_is_dropped(self, session, clock):
        session.record("C", 261.63)
        assert len(session.last_recording) == 0

        session.start()
        session.record("D", 293.66)
        session.stop()
        session.record("E", 329.63)
        assert [n.name for n in session.last_recording] == ["D"]

    def test_timestamps_non_decreasing(self, session, clock):
        session.start()
        for step in (0, 0, 30, 0, 250):
            clock.advance(step)
            session.record("C", 261.63)
        session.stop()
        stamps = [n.timestamp_ms for n in session.last_recording]
        assert stamps == sorted(stamps)


class TestFinalizedRecording:
    def test_double_stop_leaves_recording_unchanged(self, session):
        session.start()
        session.record("C", 261.63)
        session.stop()
        first = session.last_recording
        session.stop()
        assert session.last_recording is first

    def test_new_take_replaces_previous(self, session):
        session.start()
        session.record("C", 261.63)
        session.stop()
        session.start()
        session.record("G", 392.0)
        session.record("A", 440.0)
        session.stop()
        recording = session.last_recording
        assert [n.name for n in recording] == ["G", "A"]
        assert recording.name == "Take 2"

    def test_restart_clears_previous_buffer(self, session):
        session.start()
        session.record("C", 261.63)
        session.stop()
        session.start()
        session.stop()
        assert len(session.last_recording) == 0

    def test_previous_recording_available_while_recording(self, session):
        session.start()
        session.record("C", 261.63)
        session.stop()
        session.start()
        session.record("D", 293.66)
        assert [n.name for n in session.last_recording] == ["C"]

    def test_recording_is_immutable(self, session):
        session.start()
        session.record("C", 261.63)
        session.stop()
        recording = session.last_recording
        with pytest.raises(dataclasses.FrozenInstanceError):
            recording.notes = ()
        with pytest.raises(dataclasses.FrozenInstanceError):
            recording.notes[0].frequency = 1.0
