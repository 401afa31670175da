"""Defines the core interfaces for the Guitar Tools application."""

from __future__ import annotations
from abc import ABC, abstractmethod

from ..note_types import AudioClip, Note


class IAudioCapture(ABC):
    """Interface for anything that can deliver one recording."""

    @abstractmethod
    def capture(self) -> AudioClip:
        """Record one clip and return it.

        Raises:
            CaptureError: If no clip could be recorded
        """
        pass


class ITonePlayer(ABC):
    """Interface for reference-tone players."""

    @abstractmethod
    def play(self, note: Note, volume: int) -> None:
        """Play the reference pitch for ``note`` and return when it is done."""
        pass
