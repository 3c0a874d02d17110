import logging
from dataclasses import dataclass, field
from typing import List, Union

from src.sequencer.clock import MonotonicClock
from src.sequencer.models import EMPTY_RECORDING, Note, Recording

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass
class Active:
    start_ms: int
    buffer: List[Note] = field(default_factory=list)


class RecordingSession:
    """Captures live notes between start() and stop().

    The session is either Idle or Active. Only an Active session owns a
    buffer, so notes can never be appended while nothing is being captured.
    The finished take replaces the previous one.
    """

    def __init__(self, clock=None):
        self.clock = clock if clock is not None else MonotonicClock()
        self._state: Union[Idle, Active] = Idle()
        self._last = EMPTY_RECORDING
        self._takes = 0

    @property
    def is_active(self) -> bool:
        return isinstance(self._state, Active)

    @property
    def last_recording(self) -> Recording:
        return self._last

    def start(self):
        if self.is_active:
            return
        self._state = Active(start_ms=self.clock.now_ms())
        logger.info("Recording started")

    def stop(self):
        if not self.is_active:
            return
        self._takes += 1
        self._last = Recording(notes=tuple(self._state.buffer), name=f"Take {self._takes}")
        self._state = Idle()
        logger.info("Recording stopped: %s, %d notes", self._last.name, len(self._last))

    def record(self, name, frequency):
        if not self.is_active:
            logger.debug("Dropped %s: not recording", name)
            return
        elapsed = self.clock.now_ms() - self._state.start_ms
        self._state.buffer.append(Note(name, float(frequency), max(0, elapsed)))
