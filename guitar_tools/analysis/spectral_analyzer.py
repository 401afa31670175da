"""Turning a clip into a magnitude spectrum."""

import numpy as np

from ..logger import get_logger
from ..core.errors import TransformError
from ..note_types import AudioClip, Spectrum

logger = get_logger(__name__)


class SpectralAnalyzer:
    """Computes the magnitude spectrum of a whole clip.

    One real-input FFT over every sample: no window, no zero padding, no
    overlapping frames. Phase is discarded.
    """

    def analyze(self, clip: AudioClip) -> Spectrum:
        """Transform ``clip`` into a Spectrum.

        Raises:
            TransformError: If the FFT fails
        """
        samples = np.asarray(clip.samples, dtype=np.float64)
        if samples.size == 0:
            logger.warning("Empty clip, nothing to transform")
            return Spectrum(np.zeros(0), clip.sample_rate, 0)

        try:
            magnitudes = np.abs(np.fft.rfft(samples))
        except (ValueError, TypeError, MemoryError) as e:
            raise TransformError(f"FFT of {samples.size} samples failed: {e}") from e

        spectrum = Spectrum(magnitudes, clip.sample_rate, samples.size)
        logger.debug(
            f"Spectrum: {len(spectrum)} bins, {spectrum.bin_width:.3f}Hz per bin"
        )
        return spectrum
