import logging

from src.config import BASE_DURATION_MS
from src.errors import EmptyRecordingError
from src.sequencer.clock import MonotonicClock

logger = logging.getLogger(__name__)


def delays(recording):
    """Waits (ms) issued before each note when replaying `recording`."""
    out = []
    last = 0
    for note in recording:
        out.append(note.timestamp_ms - last)
        last = note.timestamp_ms
    return out


class PlaybackEngine:
    """Replays a recording with its original spacing between notes.

    Every tone is emitted for the same fixed duration; only the gaps
    between note onsets come from the recording.
    """

    def __init__(self, sleeper=None, tone_duration_ms=BASE_DURATION_MS):
        self.sleeper = sleeper if sleeper is not None else MonotonicClock()
        self.tone_duration_ms = tone_duration_ms

    def play(self, recording, tone_sink, on_note=None):
        """Play `recording` on `tone_sink`, blocking until the last tone ends.

        Args:
            recording (Recording): The take to replay; it is never modified
            tone_sink: Anything with an ``emit(frequency, duration_ms)`` method
            on_note (callable): Called with each note just before it sounds

        Raises:
            EmptyRecordingError: if the recording holds no notes.
        """
        if not recording:
            logger.warning("Playback requested with no recording")
            raise EmptyRecordingError()

        logger.info("Playing %s (%d notes)", recording.name or "recording", len(recording))
        for note, delay in zip(recording, delays(recording)):
            if delay > 0:
                self.sleeper.wait_ms(delay)
            if on_note is not None:
                on_note(note)
            tone_sink.emit(note.frequency, self.tone_duration_ms)
        logger.info("Playback finished")
