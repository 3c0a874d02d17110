from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Note:
    name: str            # e.g. "C#"
    frequency: float     # sounding frequency, Hz
    timestamp_ms: int = 0  # offset from the start of the recording


@dataclass(frozen=True)
class Recording:
    """A finished take: notes in the order they were played."""
    notes: Tuple[Note, ...] = ()
    name: Optional[str] = None

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self):
        return iter(self.notes)

    @property
    def duration_ms(self) -> int:
        return self.notes[-1].timestamp_ms if self.notes else 0


EMPTY_RECORDING = Recording()
