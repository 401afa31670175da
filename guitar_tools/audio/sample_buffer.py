"""Sample conversion and the buffer filled by the input-stream callback.

Nothing here touches the audio device, so it imports without PortAudio.
"""

from __future__ import annotations
import threading
from typing import List

import numpy as np


def normalize_samples(data: np.ndarray) -> np.ndarray:
    """Convert raw device samples to float32 amplitudes in [-1.0, 1.0].

    Signed integers are scaled by their full range, unsigned integers are
    re-centred on zero first, floats pass through unchanged.

    Raises:
        TypeError: If the samples are not numeric
    """
    data = np.asarray(data)
    if np.issubdtype(data.dtype, np.floating):
        return data.astype(np.float32)
    if np.issubdtype(data.dtype, np.signedinteger):
        scale = float(2 ** (np.iinfo(data.dtype).bits - 1))
        return (data.astype(np.float64) / scale).astype(np.float32)
    if np.issubdtype(data.dtype, np.unsignedinteger):
        half = float(2 ** (np.iinfo(data.dtype).bits - 1))
        return ((data.astype(np.float64) - half) / half).astype(np.float32)
    raise TypeError(f"Unsupported sample type: {data.dtype}")


def first_channel(indata: np.ndarray) -> np.ndarray:
    """Down-mix interleaved frames by keeping the first channel."""
    return indata[:, 0] if indata.ndim > 1 else indata


class ClipBuffer:
    """Sample buffer shared between the audio callback and the recorder.

    The callback side never waits for the lock: when the recorder holds it,
    the incoming block is dropped.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._chunks: List[np.ndarray] = []
        self._accepting = True
        self.dropped_blocks = 0
        self.status_flags = 0

    def audio_callback(
        self,
        indata: np.ndarray,
        _frames: int,
        _time_info,
        status,
    ) -> None:
        """Callback for the input stream; runs on the audio thread."""
        if status:
            self.status_flags += 1
        if not self._lock.acquire(blocking=False):
            self.dropped_blocks += 1
            return
        try:
            if self._accepting:
                self._chunks.append(normalize_samples(first_channel(indata)))
        finally:
            self._lock.release()

    def close(self) -> np.ndarray:
        """Stop accepting samples and return everything recorded so far."""
        with self._lock:
            self._accepting = False
            chunks = self._chunks
            self._chunks = []
        if not chunks:
            return np.zeros(0, dtype=np.float32)
        return np.concatenate(chunks)
