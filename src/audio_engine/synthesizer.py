import logging

import numpy as np
import sounddevice as sd

from src.audio_engine.envelope import ADSREnvelope
from src.audio_engine.waveforms import WaveformGenerator
from src.config import AudioConfig
from src.errors import AudioDeviceError

logger = logging.getLogger(__name__)

MIN_FREQUENCY = 1.0


class Synthesizer:
    """Tone sink that renders one enveloped tone at a time through sounddevice."""

    def __init__(self, cfg=None):
        self.cfg = cfg or AudioConfig()
        self.sample_rate = self.cfg.sample_rate
        self.volume = self.cfg.volume
        self.waveform_type = self.cfg.waveform

        # Audio components
        self.waveform_gen = WaveformGenerator(self.sample_rate)
        self.envelope = ADSREnvelope(self.sample_rate)
        self.envelope.set_parameters(self.cfg.attack, 0.0, 1.0, self.cfg.release)

        # Set up sounddevice
        sd.default.samplerate = self.sample_rate
        sd.default.channels = 1
        sd.default.dtype = 'float32'
        if self.cfg.device is not None:
            sd.default.device = self.cfg.device

    def check_device(self):
        """Make sure the configured output device can play our stream.

        Raises:
            AudioDeviceError: if no device accepts the sample rate.
        """
        try:
            sd.check_output_settings(
                device=self.cfg.device,
                channels=1,
                dtype='float32',
                samplerate=self.sample_rate,
            )
        except (sd.PortAudioError, ValueError) as e:
            logger.error("Audio output check failed: %s", e)
            logger.error("Available audio devices:\n%s", sd.query_devices())
            raise AudioDeviceError(f"No usable audio output device: {e}") from e

    def render(self, frequency, duration_ms):
        """Render a tone to a float32 sample buffer.

        Args:
            frequency (float): The frequency of the tone in Hz, clamped to 1 Hz
            duration_ms (int): The length of the tone in milliseconds

        Returns:
            numpy.ndarray: Mono samples in [-1, 1]
        """
        frequency = max(MIN_FREQUENCY, float(frequency))
        wave = self.waveform_gen.generate_wave(
            frequency, duration_ms / 1000.0, self.waveform_type
        )
        wave *= self.envelope.get_envelope(len(wave))

        # Apply master volume and prevent clipping
        return np.clip(wave * self.volume, -1, 1).astype(np.float32)

    def emit(self, frequency, duration_ms):
        """Play a tone and block until it has finished.

        Args:
            frequency (float): The frequency of the tone in Hz
            duration_ms (int): The length of the tone in milliseconds
        """
        if duration_ms <= 0:
            return
        audio = self.render(frequency, duration_ms)
        if len(audio) == 0:
            return
        sd.play(audio, self.sample_rate, blocking=True)

    def close(self):
        """Stop any tone that is still sounding."""
        try:
            sd.stop()
        except sd.PortAudioError as e:
            logger.warning("Error stopping audio output: %s", e)
