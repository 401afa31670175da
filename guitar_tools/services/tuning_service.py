"""Tuning service that runs capture, analysis and comparison in sequence."""

from __future__ import annotations
import threading
from typing import Callable, Optional

from ..logger import get_logger
from ..analysis import FundamentalEstimator, SpectralAnalyzer, TuningComparator
from ..core.config import TunerConfig
from ..core.errors import TuningInProgressError
from ..core.interfaces import IAudioCapture
from ..note_types import Note, TuningResult

logger = get_logger(__name__)


class TuningService:
    """Facade over the four pipeline stages.

    Every call to ``tune`` records a fresh clip; nothing carries over between
    requests.
    """

    def __init__(
        self,
        capture: Optional[IAudioCapture] = None,
        analyzer: Optional[SpectralAnalyzer] = None,
        estimator: Optional[FundamentalEstimator] = None,
        comparator: Optional[TuningComparator] = None,
        config: Optional[TunerConfig] = None,
    ) -> None:
        """Initialize the tuning service.

        Args:
            capture: Clip source, or None to record from the default input device
            analyzer: Spectrum stage, or None for the default
            estimator: Fundamental stage, or None to build one from ``config``
            comparator: Comparison stage, or None for the default
            config: Pipeline settings, or None for the built-in defaults
        """
        self._config = config or TunerConfig()
        if capture is None:
            # Imported here so the pipeline can run on recorded clips without PortAudio
            from ..audio.audio_capture import SoundDeviceCapture

            capture = SoundDeviceCapture(duration=self._config.capture_duration)
        self._capture = capture
        self._analyzer = analyzer or SpectralAnalyzer()
        self._estimator = estimator or FundamentalEstimator(
            harmonic_guard=self._config.harmonic_guard,
            min_peak_ratio=self._config.min_peak_ratio,
        )
        self._comparator = comparator or TuningComparator()

        self._busy = threading.Lock()

    def tune(self, note: Note) -> TuningResult:
        """Record the string, estimate its pitch and compare it with ``note``.

        Blocks for the capture duration plus the analysis time.

        Raises:
            CaptureError: If recording fails
            TransformError: If the FFT fails
            ValueError: If ``note`` is too low for the harmonic guard
        """
        # Fail before touching the microphone if the note cannot be searched
        self._estimator.search_limit_hz(note.frequency)

        clip = self._capture.capture()
        spectrum = self._analyzer.analyze(clip)
        index = self._estimator.estimate(spectrum, note)
        reliable = self._estimator.is_reliable(spectrum, index, note)
        estimate_hz = int(round(spectrum.bin_frequency(index)))

        result = self._comparator.compare(note, estimate_hz, reliable=reliable)
        logger.info(result.report())
        return result

    def tune_async(
        self,
        note: Note,
        on_result: Callable[[TuningResult], None],
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> threading.Thread:
        """Run ``tune`` on a worker thread and hand the outcome to a callback.

        Args:
            note: Target note
            on_result: Called with the TuningResult on success
            on_error: Called with the exception on failure; if None the
                exception is logged

        Returns:
            The started worker thread

        Raises:
            TuningInProgressError: If another request is still running
        """
        if not self._busy.acquire(blocking=False):
            raise TuningInProgressError("A tuning request is already running")

        def worker() -> None:
            try:
                result = self.tune(note)
            except Exception as e:  # pylint: disable=broad-except
                if on_error is None:
                    logger.exception(f"Tuning {note} failed: {e}")
                else:
                    on_error(e)
                return
            finally:
                self._busy.release()
            on_result(result)

        thread = threading.Thread(target=worker, name=f"tune-{note}", daemon=True)
        try:
            thread.start()
        except RuntimeError:
            self._busy.release()
            raise
        return thread

    def is_busy(self) -> bool:
        """Check if an asynchronous request is running."""
        return self._busy.locked()
