"""
Tests for src/console/display.py: text written to the terminal stream.
"""

from conftest import make_recording
from src.audio_engine.music_theory import PitchTable
from src.console.display import CLEAR_SCREEN, ConsoleDisplay
from src.sequencer.models import Note


class TestDraw:
    def test_shows_controls_and_octave(self, screen):
        ConsoleDisplay(screen).draw(6, False, 0)
        text = screen.getvalue()
        assert text.startswith(CLEAR_SCREEN)
        assert "[+/-]: Change Octave (Current: 6)" in text
        assert "[R]: Start/Stop Recording" in text
        assert "[Q]: Quit" in text
        assert "RECORDING" not in text
        assert "Recording Saved" not in text

    def test_recording_status(self, screen):
        ConsoleDisplay(screen).draw(4, True, 3)
        assert "[ RECORDING IN PROGRESS... ]" in screen.getvalue()
        assert "Recording Saved" not in screen.getvalue()

    def test_saved_count(self, screen):
        ConsoleDisplay(screen).draw(4, False, 7)
        assert "[ Recording Saved: 7 notes ]" in screen.getvalue()

    def test_key_span_from_pitch_table(self, screen):
        ConsoleDisplay(screen, PitchTable()).draw(4, False, 0)
        assert "[Keys z-m]: Play Notes" in screen.getvalue()


class TestFeedback:
    def test_live_note(self, screen):
        ConsoleDisplay(screen).show_note("C#", 5, 554.36)
        assert " -> Playing: C#5 (554.36Hz)" in screen.getvalue()
        assert screen.getvalue().endswith("\r")

    def test_playback_progress(self, screen):
        display = ConsoleDisplay(screen)
        display.playback_started(make_recording([0, 10], name="Take 3"))
        display.playback_note(Note("C", 261.63, 0))
        display.playback_note(Note("E", 329.63, 10))
        display.playback_finished()
        assert screen.getvalue() == "\n\n Playing Take 3...\nC E \nDone!\n"

    def test_message(self, screen):
        ConsoleDisplay(screen).show_message("No recording found!")
        assert screen.getvalue() == "\nNo recording found!\n"

    def test_title(self, screen):
        ConsoleDisplay(screen).set_title("Console Piano")
        assert screen.getvalue() == "\033]0;Console Piano\007"
