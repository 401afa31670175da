"""Type definitions for the Guitar Tools project."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import numpy as np


class Note(Enum):
    """Guitar-string pitches used by the supported tunings.

    Members ending in ``F`` are flats, ``S`` marks a sharp. The frequency of
    each member lives in ``NOTE_FREQUENCIES``.
    """

    # Standard
    E2 = "E2"
    A2 = "A2"
    D3 = "D3"
    G3 = "G3"
    B3 = "B3"
    E4 = "E4"
    # Half step down
    E2F = "E2F"
    A2F = "A2F"
    D3F = "D3F"
    G3F = "G3F"
    B3F = "B3F"
    E4F = "E4F"
    # Full step down / drop D
    D2 = "D2"
    G2 = "G2"
    C3 = "C3"
    F3 = "F3"
    A3 = "A3"
    D4 = "D4"
    # Open E
    B2 = "B2"
    E3 = "E3"
    G3S = "G3S"

    @property
    def frequency(self) -> int:
        """Target frequency of the note in whole Hz."""
        return NOTE_FREQUENCIES[self]

    @classmethod
    def from_name(cls, name: str) -> "Note":
        """Look a note up by its symbolic name, ignoring case.

        Raises:
            ValueError: If ``name`` is not a known note
        """
        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError:
            known = ", ".join(member.name for member in cls)
            raise ValueError(f"Unknown note '{name}' (known notes: {known})") from None

    def __str__(self):
        return self.name


# Whole-Hz targets, rounded from scientific pitch notation (A4 = 440 Hz)
NOTE_FREQUENCIES: Dict[Note, int] = {
    Note.E2: 82,
    Note.A2: 110,
    Note.D3: 147,
    Note.G3: 196,
    Note.B3: 247,
    Note.E4: 330,
    Note.E2F: 78,
    Note.A2F: 104,
    Note.D3F: 138,
    Note.G3F: 185,
    Note.B3F: 233,
    Note.E4F: 311,
    Note.D2: 73,
    Note.G2: 98,
    Note.C3: 131,
    Note.F3: 175,
    Note.A3: 220,
    Note.D4: 294,
    Note.B2: 123,
    Note.E3: 165,
    Note.G3S: 208,
}


@dataclass(frozen=True, eq=False)
class AudioClip:
    """A mono recording and the sample rate it was captured at."""

    samples: np.ndarray
    sample_rate: int

    def __post_init__(self):
        samples = np.array(self.samples, dtype=np.float64).reshape(-1)
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")

    def __len__(self):
        return len(self.samples)

    @property
    def duration(self) -> float:
        """Length of the clip in seconds."""
        return len(self.samples) / self.sample_rate


@dataclass(frozen=True, eq=False)
class Spectrum:
    """Magnitude spectrum of one clip.

    Bin ``i`` covers roughly ``i * sample_rate / clip_length`` Hz. When the
    sample rate or clip length is unknown each bin is taken to be 1 Hz wide.
    """

    magnitudes: np.ndarray
    sample_rate: Optional[float] = None
    clip_length: Optional[int] = None

    def __post_init__(self):
        magnitudes = np.array(self.magnitudes, dtype=np.float64).reshape(-1)
        magnitudes.setflags(write=False)
        object.__setattr__(self, "magnitudes", magnitudes)

    def __len__(self):
        return len(self.magnitudes)

    @property
    def bin_width(self) -> float:
        """Width of one bin in Hz."""
        if not self.sample_rate or not self.clip_length:
            return 1.0
        return self.sample_rate / self.clip_length

    def bin_frequency(self, index: int) -> float:
        """Centre frequency of bin ``index`` in Hz."""
        return index * self.bin_width


class Verdict(Enum):
    """Outcome of comparing a recorded pitch with its target."""

    TOO_LOW = "You should tighten your string!"
    TOO_HIGH = "You should loosen your string!"
    IN_TUNE = "Perfect!"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class TuningResult:
    """Represents one comparison between a target and a recorded pitch."""

    target_hz: int  # Frequency of the requested note
    estimate_hz: int  # Recorded pitch, whole Hz
    verdict: Verdict
    reliable: bool = True  # False when the peak barely rises above the noise

    def report(self) -> str:
        """Render the result as the single line shown to the player."""
        line = (
            f"Result: (Target Pitch: {self.target_hz} Hz "
            f"Recorded Pitch: {self.estimate_hz} Hz): \"{self.verdict.message}\""
        )
        if not self.reliable:
            line += " (low confidence, try again)"
        return line

    def __str__(self):
        return self.report()
