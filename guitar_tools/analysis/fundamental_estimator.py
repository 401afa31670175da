"""Picking the fundamental out of a spectrum full of harmonics.

A plucked string puts as much energy, often more, into its 2nd and 3rd
harmonics as into its fundamental, so the loudest bin overall is frequently
an octave or more above the pitch being played. The estimator assumes the
string is already roughly in tune and only looks below the target's second
harmonic, minus a guard margin.
"""

from __future__ import annotations
import math
from typing import ClassVar

import numpy as np

from ..logger import get_logger
from ..core.config import HARMONIC_GUARD, MIN_PEAK_RATIO
from ..note_types import Note, Spectrum

logger = get_logger(__name__)


class FundamentalEstimator:
    """Finds the strongest bin below the target's second harmonic."""

    HARMONIC: ClassVar[int] = 2  # Harmonic the search window stops short of

    def __init__(
        self,
        harmonic_guard: int = HARMONIC_GUARD,
        min_peak_ratio: float = MIN_PEAK_RATIO,
    ) -> None:
        """
        Args:
            harmonic_guard: Margin in Hz kept below the target's second harmonic
            min_peak_ratio: How far above the window's median the peak must be to be trusted
        """
        if harmonic_guard < 0:
            raise ValueError(f"harmonic_guard must not be negative, got {harmonic_guard}")
        self._harmonic_guard = harmonic_guard
        self._min_peak_ratio = min_peak_ratio

    @property
    def harmonic_guard(self) -> int:
        return self._harmonic_guard

    def search_limit_hz(self, target_hz: int) -> int:
        """Upper bound (exclusive) of the search window in Hz.

        Raises:
            ValueError: If the target is too low to leave a window
        """
        if target_hz * self.HARMONIC <= self._harmonic_guard:
            raise ValueError(
                f"Target {target_hz}Hz is too low for a harmonic guard of "
                f"{self._harmonic_guard}Hz"
            )
        return target_hz * self.HARMONIC - self._harmonic_guard

    def search_limit(self, spectrum: Spectrum, target_hz: int) -> int:
        """Number of leading bins the search may look at."""
        limit_bins = math.ceil(self.search_limit_hz(target_hz) / spectrum.bin_width)
        return min(limit_bins, len(spectrum))

    def estimate(self, spectrum: Spectrum, target: Note) -> int:
        """Return the index of the strongest bin inside the search window.

        Ties go to the lowest index. An empty spectrum gives 0.

        Raises:
            ValueError: If the target is too low for the harmonic guard
        """
        limit = self.search_limit(spectrum, target.frequency)
        if limit == 0:
            logger.warning("Empty search window, returning bin 0")
            return 0

        index = int(np.argmax(spectrum.magnitudes[:limit]))
        logger.debug(
            f"Target {target} ({target.frequency}Hz): searched bins 0-{limit - 1}, "
            f"peak at bin {index} ({spectrum.bin_frequency(index):.1f}Hz)"
        )
        return index

    def is_reliable(self, spectrum: Spectrum, index: int, target: Note) -> bool:
        """Tell whether the peak at ``index`` stands out from the noise floor.

        The noise floor is the median magnitude of the search window.
        """
        limit = self.search_limit(spectrum, target.frequency)
        if limit == 0 or not 0 <= index < limit:
            return False

        window = spectrum.magnitudes[:limit]
        peak = window[index]
        if peak <= 0:
            return False

        noise_floor = float(np.median(window))
        if noise_floor == 0:
            return True
        ratio = peak / noise_floor
        if ratio < self._min_peak_ratio:
            logger.info(
                f"Weak peak: {ratio:.1f}x the noise floor (need {self._min_peak_ratio:g}x)"
            )
            return False
        return True
