import numpy as np
import pytest

from guitar_tools.core.interfaces import IAudioCapture
from guitar_tools.note_types import AudioClip


def sine(frequency, sample_rate=48000, duration=1.0, amplitude=1.0):
    t = np.arange(int(round(sample_rate * duration))) / sample_rate
    return amplitude * np.sin(2 * np.pi * frequency * t)


class SyntheticCapture(IAudioCapture):
    """Hands out a prepared clip instead of recording."""

    def __init__(self, samples, sample_rate=48000):
        self.samples = samples
        self.sample_rate = sample_rate
        self.calls = 0

    def capture(self):
        self.calls += 1
        return AudioClip(samples=self.samples, sample_rate=self.sample_rate)


@pytest.fixture
def sine_wave():
    return sine
