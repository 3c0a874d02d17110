import numpy as np

class ADSREnvelope:
    def __init__(self, sample_rate=44100):
        self.sample_rate = sample_rate
        self.set_parameters(0.01, 0.05, 0.8, 0.05)

    def set_parameters(self, attack, decay, sustain, release):
        """Set ADSR parameters in seconds, sustain is amplitude level 0-1."""
        self.attack = max(0.0, attack)
        self.decay = max(0.0, decay)
        self.sustain = max(0.0, min(1.0, sustain))
        self.release = max(0.0, release)

    def get_envelope(self, num_samples):
        """Generate the envelope for a note lasting exactly `num_samples`.

        The release tail sits inside the note so the tone ends at zero
        amplitude without running past its nominal duration. Stages are
        shortened proportionally when the note is too short to hold them.
        """
        if num_samples <= 0:
            return np.zeros(0)

        attack = int(self.attack * self.sample_rate)
        decay = int(self.decay * self.sample_rate)
        release = int(self.release * self.sample_rate)

        total = attack + decay + release
        if total > num_samples:
            scale = num_samples / total
            attack = int(attack * scale)
            decay = int(decay * scale)
            release = int(release * scale)
        hold = num_samples - attack - decay - release

        return np.concatenate([
            np.linspace(0.0, 1.0, attack, endpoint=False),
            np.linspace(1.0, self.sustain, decay, endpoint=False),
            np.full(hold, self.sustain),
            np.linspace(self.sustain, 0.0, release),
        ])
