"""Core components for the Guitar Tools application."""

# Import interfaces for easier access
from .interfaces import IAudioCapture, ITonePlayer
from .errors import (
    GuitarToolsError,
    CaptureError,
    TransformError,
    PlaybackError,
    TuningInProgressError,
)
from .config import TunerConfig, ConfigManager

__all__ = [
    "IAudioCapture",
    "ITonePlayer",
    "GuitarToolsError",
    "CaptureError",
    "TransformError",
    "PlaybackError",
    "TuningInProgressError",
    "TunerConfig",
    "ConfigManager",
]
