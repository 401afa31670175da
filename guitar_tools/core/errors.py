"""Exception hierarchy for Guitar Tools."""


class GuitarToolsError(Exception):
    """Base class for all errors raised by Guitar Tools."""


class CaptureError(GuitarToolsError):
    """The input device could not deliver a recording.

    Covers a missing input device, a device without a usable configuration
    and a stream that fails to open. The tuning attempt fails; trying again
    after checking the microphone is the expected recovery.
    """


class TransformError(GuitarToolsError):
    """The Fourier transform of a clip failed.

    This is an internal failure, never a user condition.
    """


class PlaybackError(GuitarToolsError):
    """A reference tone could not be played on the output device."""


class TuningInProgressError(GuitarToolsError):
    """A tuning request arrived while another one was still running."""
