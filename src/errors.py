class PianoError(Exception):
    """Base class for errors raised by the console piano."""


class ConfigError(PianoError):
    """Raised when the application configuration is out of range."""


class AudioDeviceError(PianoError):
    """Raised when no usable audio output device is available."""


class EmptyRecordingError(PianoError):
    """Raised when playback is requested but nothing has been recorded."""

    def __init__(self, message="No recording found!"):
        super().__init__(message)
