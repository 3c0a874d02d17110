from collections import namedtuple
from types import MappingProxyType

REFERENCE_OCTAVE = 4
MIN_OCTAVE = 1
MAX_OCTAVE = 8

PitchEntry = namedtuple('PitchEntry', ['symbol', 'name', 'frequency'])

# Computer keyboard row Z-M, reference frequencies for octave 4 (middle C to B)
_ENTRIES = (
    PitchEntry('z', 'C', 261.63),
    PitchEntry('s', 'C#', 277.18),
    PitchEntry('x', 'D', 293.66),
    PitchEntry('d', 'D#', 311.13),
    PitchEntry('c', 'E', 329.63),
    PitchEntry('v', 'F', 349.23),
    PitchEntry('g', 'F#', 369.99),
    PitchEntry('b', 'G', 392.00),
    PitchEntry('h', 'G#', 415.30),
    PitchEntry('n', 'A', 440.00),
    PitchEntry('j', 'A#', 466.16),
    PitchEntry('m', 'B', 493.88),
)


class PitchTable:
    """Fixed mapping from a keyboard symbol to a note at the reference octave."""

    def __init__(self, entries=_ENTRIES):
        self._entries = tuple(entries)
        self._by_symbol = MappingProxyType({e.symbol: e for e in self._entries})

    def lookup(self, symbol):
        """Get the pitch entry for a lowercase key symbol, or None if unmapped."""
        return self._by_symbol.get(symbol)

    def symbols(self):
        """Get the mapped key symbols in chromatic order."""
        return [e.symbol for e in self._entries]

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


def transpose(reference_freq, octave):
    """Shift a reference-octave frequency to the given octave.

    Each octave step doubles (or halves) the frequency, so octave 4 returns
    the reference frequency unchanged.
    """
    return float(reference_freq) * (2.0 ** (octave - REFERENCE_OCTAVE))


class Octave:
    """Current octave, clamped to the playable range."""

    def __init__(self, value=REFERENCE_OCTAVE):
        self.value = max(MIN_OCTAVE, min(MAX_OCTAVE, int(value)))

    def increment(self):
        self.value = min(MAX_OCTAVE, self.value + 1)
        return self.value

    def decrement(self):
        self.value = max(MIN_OCTAVE, self.value - 1)
        return self.value

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"Octave({self.value})"
