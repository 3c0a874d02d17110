import enum
import logging

from src.audio_engine.music_theory import Octave, PitchTable, transpose
from src.config import BASE_DURATION_MS
from src.errors import EmptyRecordingError
from src.sequencer.clock import MonotonicClock
from src.sequencer.playback import PlaybackEngine
from src.sequencer.recorder import RecordingSession

logger = logging.getLogger(__name__)

MESSAGE_PAUSE_MS = 1000


class Action(enum.Enum):
    QUIT = 'quit'
    RECORD = 'record'
    PLAY = 'play'
    OCTAVE = 'octave'
    NOTE = 'note'
    IGNORED = 'ignored'


class InputRouter:
    """Turns key symbols into piano commands or notes.

    Holds all of the piano's state: the current octave, the recording
    session and the collaborators used to make sound and draw the screen.
    """

    def __init__(self, tone_sink, display, clock=None, pitch_table=None,
                 octave=None, session=None, engine=None,
                 tone_duration_ms=BASE_DURATION_MS):
        self.tone_sink = tone_sink
        self.display = display
        self.clock = clock if clock is not None else MonotonicClock()
        self.pitch_table = pitch_table if pitch_table is not None else PitchTable()
        self.octave = octave if octave is not None else Octave()
        self.session = session if session is not None else RecordingSession(self.clock)
        self.engine = engine if engine is not None else PlaybackEngine(self.clock, tone_duration_ms)
        self.tone_duration_ms = tone_duration_ms

    def dispatch(self, symbol):
        """Handle one key press and report what it did."""
        if symbol in ('q', 'Q'):
            return Action.QUIT
        if symbol in ('r', 'R'):
            self.toggle_recording()
            return Action.RECORD
        if symbol in ('p', 'P'):
            self.play_recording()
            return Action.PLAY
        if symbol == '+':
            self.change_octave(+1)
            return Action.OCTAVE
        if symbol == '-':
            self.change_octave(-1)
            return Action.OCTAVE
        if self.play_tone(symbol.lower()):
            return Action.NOTE
        logger.debug("Ignored key %r", symbol)
        return Action.IGNORED

    def redraw(self):
        self.display.draw(
            self.octave.value,
            self.session.is_active,
            len(self.session.last_recording),
        )

    def toggle_recording(self):
        if self.session.is_active:
            self.session.stop()
        else:
            self.session.start()
        self.redraw()

    def change_octave(self, delta):
        if delta > 0:
            self.octave.increment()
        else:
            self.octave.decrement()
        logger.debug("Octave is now %d", self.octave.value)
        self.redraw()

    def play_tone(self, symbol):
        """Sound the note mapped to `symbol`; False if the key has no note."""
        entry = self.pitch_table.lookup(symbol)
        if entry is None:
            return False
        frequency = transpose(entry.frequency, self.octave.value)
        self.display.show_note(entry.name, self.octave.value, frequency)
        if self.session.is_active:
            self.session.record(entry.name, frequency)
        self.tone_sink.emit(frequency, self.tone_duration_ms)
        return True

    def play_recording(self):
        recording = self.session.last_recording
        try:
            if recording:
                self.display.playback_started(recording)
            self.engine.play(recording, self.tone_sink, on_note=self.display.playback_note)
        except EmptyRecordingError as e:
            self.display.show_message(str(e))
        else:
            self.display.playback_finished()
        self.clock.wait_ms(MESSAGE_PAUSE_MS)
        self.redraw()
