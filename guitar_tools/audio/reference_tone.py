"""Synthesizing and playing reference pitches for tuning by ear."""

from __future__ import annotations

import numpy as np
import sounddevice as sd

from ..logger import get_logger
from ..core.config import DEFAULT_VOLUME, REFERENCE_SAMPLE_RATE
from ..core.errors import PlaybackError
from ..core.interfaces import ITonePlayer
from ..note_types import Note

logger = get_logger(__name__)

MAX_VOLUME = 100
TONE_DURATION = 1.0  # seconds


def synthesize_tone(
    frequency_hz: float,
    volume: int = DEFAULT_VOLUME,
    sample_rate: int = REFERENCE_SAMPLE_RATE,
    duration: float = TONE_DURATION,
) -> np.ndarray:
    """Build a sine wave at ``frequency_hz``.

    Args:
        frequency_hz: Pitch of the tone
        volume: Loudness on a 0-100 scale, clamped to that range
        sample_rate: Samples per second
        duration: Length in seconds

    Returns:
        float32 samples with peak amplitude ``volume / 100``
    """
    if frequency_hz <= 0:
        raise ValueError(f"frequency must be positive, got {frequency_hz}")
    if sample_rate <= 0 or duration <= 0:
        raise ValueError("sample_rate and duration must be positive")

    amplitude = min(max(volume, 0), MAX_VOLUME) / MAX_VOLUME
    t = np.arange(int(round(sample_rate * duration))) / sample_rate
    return (amplitude * np.sin(2.0 * np.pi * frequency_hz * t)).astype(np.float32)


class ReferenceTonePlayer(ITonePlayer):
    """Plays reference tones on the default output device."""

    def __init__(
        self,
        sample_rate: int = REFERENCE_SAMPLE_RATE,
        duration: float = TONE_DURATION,
    ) -> None:
        self._sample_rate = sample_rate
        self._duration = duration

    def play(self, note: Note, volume: int = DEFAULT_VOLUME) -> None:
        """Play ``note`` and block until the tone has finished.

        Raises:
            PlaybackError: If the output device rejects the tone
        """
        tone = synthesize_tone(note.frequency, volume, self._sample_rate, self._duration)
        logger.info(f"Playing {note} ({note.frequency}Hz) at volume {volume}")
        try:
            sd.play(tone, samplerate=self._sample_rate)
            sd.wait()
        except (sd.PortAudioError, ValueError) as e:
            raise PlaybackError(f"Could not play {note}: {e}") from e
