import logging
import sys

from pynput import keyboard

try:
    import termios
    import tty
except ImportError:  # Windows consoles have no termios
    termios = None
    tty = None

logger = logging.getLogger(__name__)


class KeyboardSource:
    """Blocking single-character key reader.

    pynput delivers key presses from a listener thread; `read_key` waits on
    its event queue and skips releases and keys without a character
    (shift, arrows, function keys).

    While open, a terminal on stdin is put in cbreak mode so typed keys are
    neither echoed nor line buffered. The saved settings are restored on
    exit and pending input is flushed, so nothing typed during the session
    reaches the shell afterwards.
    """

    def __init__(self, stdin=None):
        self.stdin = stdin or sys.stdin
        self._events = None
        self._saved_tty = None

    def __enter__(self):
        self._enter_cbreak()
        try:
            events = keyboard.Events()
            events.__enter__()
        except Exception:
            self._restore_terminal()
            raise
        self._events = events
        logger.debug("Keyboard listener started")
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            if self._events is not None:
                self._events.__exit__(exc_type, exc, tb)
                self._events = None
                logger.debug("Keyboard listener stopped")
        finally:
            self._restore_terminal()

    def _enter_cbreak(self):
        if termios is None or not self.stdin.isatty():
            return
        fd = self.stdin.fileno()
        self._saved_tty = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        logger.debug("Terminal switched to cbreak mode")

    def _restore_terminal(self):
        if self._saved_tty is None:
            return
        termios.tcsetattr(self.stdin.fileno(), termios.TCSAFLUSH, self._saved_tty)
        self._saved_tty = None
        logger.debug("Terminal settings restored")

    def read_key(self):
        if self._events is None:
            raise RuntimeError("KeyboardSource must be used as a context manager")
        while True:
            event = self._events.get()
            if not isinstance(event, keyboard.Events.Press):
                continue
            char = getattr(event.key, 'char', None)
            if char:
                return char
