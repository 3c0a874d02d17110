import logging

from src.audio_engine.music_theory import Octave
from src.config import AppConfig
from src.console.router import Action, InputRouter

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Console Piano"


class ConsolePiano:
    """The running piano: one router, one key source, one loop."""

    def __init__(self, key_source, tone_sink, display, clock=None, cfg=None):
        self.cfg = cfg or AppConfig()
        self.key_source = key_source
        self.display = display
        self.router = InputRouter(
            tone_sink,
            display,
            clock=clock,
            octave=Octave(self.cfg.keyboard.start_octave),
            tone_duration_ms=self.cfg.audio.tone_duration_ms,
        )

    def run(self):
        """Read and dispatch keys until the quit key is pressed."""
        self.display.set_title(WINDOW_TITLE)
        self.router.redraw()
        while True:
            key = self.key_source.read_key()
            if self.router.dispatch(key) is Action.QUIT:
                break
        logger.info("Quit requested")
