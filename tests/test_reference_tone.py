from unittest.mock import patch

import numpy as np
import pytest

try:
    import sounddevice as sd
except OSError:
    pytest.skip("PortAudio library not available", allow_module_level=True)

from guitar_tools.analysis import SpectralAnalyzer
from guitar_tools.audio.reference_tone import ReferenceTonePlayer, synthesize_tone
from guitar_tools.core.errors import PlaybackError
from guitar_tools.note_types import AudioClip, Note


def test_tone_length_and_level():
    tone = synthesize_tone(82, volume=50)
    assert tone.dtype == np.float32
    assert len(tone) == 48000
    assert np.max(np.abs(tone)) == pytest.approx(0.5, abs=1e-3)


def test_volume_is_clamped():
    assert np.max(np.abs(synthesize_tone(110, volume=250))) == pytest.approx(1.0, abs=1e-3)
    assert not synthesize_tone(110, volume=-3).any()


def test_tone_has_the_requested_pitch():
    spectrum = SpectralAnalyzer().analyze(AudioClip(synthesize_tone(147, volume=10), 48000))
    assert int(np.argmax(spectrum.magnitudes)) == 147


def test_invalid_frequency():
    with pytest.raises(ValueError):
        synthesize_tone(0)


def test_play_blocks_until_done():
    with patch.object(sd, "play") as play, patch.object(sd, "wait") as wait:
        ReferenceTonePlayer().play(Note.A2, volume=20)
    tone = play.call_args.args[0]
    assert play.call_args.kwargs["samplerate"] == 48000
    assert np.max(np.abs(tone)) == pytest.approx(0.2, abs=1e-3)
    wait.assert_called_once()


def test_playback_failure():
    with patch.object(sd, "play", side_effect=sd.PortAudioError("no output")):
        with pytest.raises(PlaybackError):
            ReferenceTonePlayer().play(Note.E2)
