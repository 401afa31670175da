"""Recording a single clip for pitch analysis."""

from __future__ import annotations
import time
from typing import Optional, Tuple

import sounddevice as sd
import soundfile as sf

from ..logger import get_logger
from ..core.config import CAPTURE_DURATION
from ..core.errors import CaptureError
from ..core.interfaces import IAudioCapture
from ..note_types import AudioClip
from .sample_buffer import ClipBuffer, first_channel

logger = get_logger(__name__)


class SoundDeviceCapture(IAudioCapture):
    """Records from the default input device using sounddevice.

    The device's own default sample rate, channel count and sample format are
    used as-is; nothing is negotiated.
    """

    def __init__(
        self,
        duration: float = CAPTURE_DURATION,
        device_id: Optional[int] = None,
    ) -> None:
        """Initialize the recorder.

        Args:
            duration: Recording length in seconds
            device_id: Input device to use, or None for the system default
        """
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        self._duration = duration
        self._device_id = device_id

    def _device_settings(self) -> Tuple[Optional[int], int, float, str]:
        """Return (device, channels, sample rate, dtype) of the input device.

        Raises:
            CaptureError: If there is no input device or it reports no usable configuration
        """
        try:
            info = sd.query_devices(self._device_id, kind="input")
        except (sd.PortAudioError, ValueError) as e:
            raise CaptureError(
                f"No input device available, check your microphone ({e})"
            ) from e

        channels = int(info.get("max_input_channels", 0))
        sample_rate = float(info.get("default_samplerate") or 0)
        if channels < 1 or sample_rate <= 0:
            raise CaptureError(
                f"Input device '{info.get('name', '?')}' reports no supported "
                "configuration, check your microphone"
            )

        dtype = sd.default.dtype[0] or "float32"
        logger.debug(
            f"Using input device '{info.get('name', '?')}': "
            f"channels={channels}, rate={sample_rate:g}Hz, dtype={dtype}"
        )
        return self._device_id, channels, sample_rate, dtype

    def capture(self) -> AudioClip:
        """Record ``duration`` seconds from the input device.

        Returns:
            The recorded clip at the sample rate the stream actually ran at

        Raises:
            CaptureError: If the device cannot be opened or started
        """
        device, channels, sample_rate, dtype = self._device_settings()
        buffer = ClipBuffer()

        try:
            stream = sd.InputStream(
                device=device,
                channels=channels,
                samplerate=sample_rate,
                dtype=dtype,
                callback=buffer.audio_callback,
            )
        except (sd.PortAudioError, ValueError) as e:
            raise CaptureError(f"Could not open the input stream: {e}") from e

        try:
            stream.start()
        except sd.PortAudioError as e:
            stream.close()
            raise CaptureError(f"Could not start the input stream: {e}") from e

        logger.info(f"Recording for {self._duration:g}s")
        try:
            time.sleep(self._duration)
        finally:
            samples = buffer.close()
            try:
                stream.stop()
            except sd.PortAudioError as e:
                logger.error(f"Error stopping input stream: {e}")
            finally:
                try:
                    stream.close()
                except sd.PortAudioError as e:
                    logger.error(f"Error closing input stream: {e}")

        actual_rate = int(round(stream.samplerate))
        if buffer.dropped_blocks:
            logger.debug(f"Dropped {buffer.dropped_blocks} blocks under contention")
        if buffer.status_flags:
            logger.warning(f"Input stream reported {buffer.status_flags} over/underflows")
        logger.info(f"Captured {len(samples)} samples at {actual_rate}Hz")

        return AudioClip(samples=samples, sample_rate=actual_rate)


class WavFileCapture(IAudioCapture):
    """Provides a clip by reading a recording from disk."""

    def __init__(self, file_path: str, duration: Optional[float] = None) -> None:
        """
        Args:
            file_path: Path of the audio file
            duration: Seconds to read from the start, or None for the whole file
        """
        if duration is not None and duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        self._file_path = file_path
        self._duration = duration

    def capture(self) -> AudioClip:
        try:
            with sf.SoundFile(self._file_path) as f:
                sample_rate = f.samplerate
                frames = -1
                if self._duration is not None:
                    frames = int(round(self._duration * sample_rate))
                data = f.read(frames, dtype="float64", always_2d=True)
        except (OSError, RuntimeError) as e:
            raise CaptureError(f"Could not read {self._file_path}: {e}") from e

        logger.info(
            f"Read {len(data)} frames at {sample_rate}Hz from {self._file_path}"
        )
        return AudioClip(samples=first_channel(data), sample_rate=sample_rate)
