import sys

CLEAR_SCREEN = "\033[2J\033[H"
RULE = "=" * 50


class ConsoleDisplay:
    """Text screen for the console piano."""

    def __init__(self, stream=None, pitch_table=None):
        self.stream = stream or sys.stdout
        self.pitch_table = pitch_table

    def _write(self, text):
        self.stream.write(text)
        self.stream.flush()

    def set_title(self, title):
        # xterm-style window title; ignored by terminals that don't support it
        self._write(f"\033]0;{title}\007")

    def draw(self, octave, is_recording, saved_count):
        lines = [
            RULE,
            "   CONSOLE PIANO",
            RULE,
            " Controls:",
            f"  [Keys {self._key_span()}]: Play Notes",
            "  [R]: Start/Stop Recording",
            "  [P]: Play Last Recording",
            f"  [+/-]: Change Octave (Current: {octave})",
            "  [Q]: Quit",
            RULE,
            "",
            "   | |S| |D| | |G| |H| |J| | |",
            "   | | | | | | | | | | | | | |",
            "   |_| |_| |_| |_| |_| |_| |_|",
            "    Z   X   C   V   B   N   M ",
            "",
        ]
        if is_recording:
            lines.append("  [ RECORDING IN PROGRESS... ]")
        elif saved_count:
            lines.append(f"  [ Recording Saved: {saved_count} notes ]")
        self._write(CLEAR_SCREEN + "\n".join(lines) + "\n")

    def _key_span(self):
        if self.pitch_table is None or not len(self.pitch_table):
            return "z-m"
        symbols = self.pitch_table.symbols()
        return f"{symbols[0]}-{symbols[-1]}"

    def show_note(self, name, octave, frequency):
        self._write(f" -> Playing: {name}{octave} ({frequency:.2f}Hz)   \r")

    def playback_started(self, recording):
        self._write(f"\n\n Playing {recording.name or 'Recording'}...\n")

    def playback_note(self, note):
        self._write(f"{note.name} ")

    def playback_finished(self):
        self._write("\nDone!\n")

    def show_message(self, message):
        self._write(f"\n{message}\n")
