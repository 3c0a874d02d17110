import numpy as np

class WaveformGenerator:
    def __init__(self, sample_rate=44100):
        self.sample_rate = sample_rate

    def num_samples(self, duration):
        """Number of samples covering `duration` seconds."""
        return int(round(self.sample_rate * duration))

    def generate_wave(self, frequency, duration, waveform_type='sine'):
        """Generate `duration` seconds of a waveform at `frequency` Hz."""
        t = np.arange(self.num_samples(duration)) / self.sample_rate

        if waveform_type == 'square':
            return self.generate_square(t, frequency)
        elif waveform_type == 'triangle':
            return self.generate_triangle(t, frequency)
        elif waveform_type == 'saw':
            return self.generate_saw(t, frequency)
        else:
            return self.generate_sine(t, frequency)

    def generate_sine(self, t, frequency):
        return np.sin(2 * np.pi * frequency * t)

    def generate_square(self, t, frequency):
        return np.sign(np.sin(2 * np.pi * frequency * t))

    def generate_triangle(self, t, frequency):
        return 2 * np.abs(2 * (frequency * t % 1) - 1) - 1

    def generate_saw(self, t, frequency):
        return 2 * (frequency * t % 1) - 1
