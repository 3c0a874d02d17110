from dataclasses import dataclass, field
from typing import Optional

from src.audio_engine.music_theory import MAX_OCTAVE, MIN_OCTAVE, REFERENCE_OCTAVE
from src.errors import ConfigError

BASE_DURATION_MS = 200
WAVEFORMS = ('sine', 'square', 'triangle', 'saw')


@dataclass
class AudioConfig:
    sample_rate: int = 44100
    waveform: str = 'sine'
    volume: float = 0.5
    tone_duration_ms: int = BASE_DURATION_MS
    attack: float = 0.01   # seconds
    release: float = 0.05  # seconds
    device: Optional[str] = None


@dataclass
class KeyboardConfig:
    start_octave: int = REFERENCE_OCTAVE


@dataclass
class LogConfig:
    level: str = 'INFO'
    path: Optional[str] = None  # defaults to logs/console_piano.log


@dataclass
class AppConfig:
    audio: AudioConfig = field(default_factory=AudioConfig)
    keyboard: KeyboardConfig = field(default_factory=KeyboardConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def validate(self):
        """Raise ConfigError on the first out-of-range setting."""
        audio = self.audio
        if audio.sample_rate <= 0:
            raise ConfigError(f"sample rate must be positive, got {audio.sample_rate}")
        if audio.waveform not in WAVEFORMS:
            raise ConfigError(f"unknown waveform {audio.waveform!r}, expected one of {', '.join(WAVEFORMS)}")
        if not 0.0 <= audio.volume <= 1.0:
            raise ConfigError(f"volume must be between 0 and 1, got {audio.volume}")
        if audio.tone_duration_ms < 0:
            raise ConfigError(f"tone duration must not be negative, got {audio.tone_duration_ms}")
        if audio.attack < 0 or audio.release < 0:
            raise ConfigError("envelope times must not be negative")
        octave = self.keyboard.start_octave
        if not MIN_OCTAVE <= octave <= MAX_OCTAVE:
            raise ConfigError(f"octave must be between {MIN_OCTAVE} and {MAX_OCTAVE}, got {octave}")
        return self
