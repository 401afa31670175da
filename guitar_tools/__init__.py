"""Guitar Tools: reference pitches and recording-based tuning checks for guitar."""

from .note_types import Note, NOTE_FREQUENCIES, AudioClip, Spectrum, Verdict, TuningResult
from .tunings import Tuning, TUNINGS, get_tuning

__version__ = "0.1.0"

__all__ = [
    "Note",
    "NOTE_FREQUENCIES",
    "AudioClip",
    "Spectrum",
    "Verdict",
    "TuningResult",
    "Tuning",
    "TUNINGS",
    "get_tuning",
]
