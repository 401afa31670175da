import numpy as np
import pytest

from guitar_tools.analysis import FundamentalEstimator, SpectralAnalyzer
from guitar_tools.note_types import AudioClip, Note, Spectrum


def spectrum_with_peaks(peaks, size=800, **kwargs):
    magnitudes = np.zeros(size)
    for index, value in peaks.items():
        magnitudes[index] = value
    return Spectrum(magnitudes, **kwargs)


@pytest.mark.parametrize("note", list(Note))
def test_peak_at_search_limit_is_never_selected(note):
    estimator = FundamentalEstimator()
    limit = note.frequency * 2 - 20
    spectrum = spectrum_with_peaks({limit: 1000.0, limit + 5: 5000.0, note.frequency: 1.0})
    assert estimator.estimate(spectrum, note) == note.frequency


def test_last_bin_below_limit_is_selectable():
    spectrum = spectrum_with_peaks({143: 10.0, 82: 1.0})
    assert FundamentalEstimator().estimate(spectrum, Note.E2) == 143


def test_second_harmonic_is_ignored(sine_wave):
    samples = sine_wave(82, amplitude=0.4) + sine_wave(164) + sine_wave(246, amplitude=0.8)
    spectrum = SpectralAnalyzer().analyze(AudioClip(samples, 48000))
    assert int(np.argmax(spectrum.magnitudes)) == 164
    assert FundamentalEstimator().estimate(spectrum, Note.E2) == 82


@pytest.mark.parametrize("note", [Note.D2, Note.E2, Note.A2, Note.G3, Note.E4])
def test_pure_tone_is_recovered(note, sine_wave):
    spectrum = SpectralAnalyzer().analyze(AudioClip(sine_wave(note.frequency), 48000))
    estimate = FundamentalEstimator().estimate(spectrum, note)
    assert abs(estimate - note.frequency) <= 1


def test_ties_go_to_the_lowest_bin():
    spectrum = spectrum_with_peaks({90: 3.0, 100: 3.0})
    assert FundamentalEstimator().estimate(spectrum, Note.E2) == 90


def test_empty_and_silent_spectra_give_zero():
    estimator = FundamentalEstimator()
    assert estimator.estimate(Spectrum(np.zeros(0)), Note.E2) == 0
    assert estimator.estimate(Spectrum(np.zeros(300)), Note.E2) == 0


def test_spectrum_shorter_than_window():
    spectrum = spectrum_with_peaks({30: 2.0}, size=50)
    assert FundamentalEstimator().estimate(spectrum, Note.E4) == 30


def test_window_follows_bin_width():
    # 2 Hz bins: E2's 144 Hz limit is bin 72
    spectrum = spectrum_with_peaks({41: 1.0, 72: 50.0}, size=300,
                                   sample_rate=44100, clip_length=22050)
    estimator = FundamentalEstimator()
    assert estimator.search_limit(spectrum, 82) == 72
    assert estimator.estimate(spectrum, Note.E2) == 41


def test_target_too_low_for_guard():
    estimator = FundamentalEstimator(harmonic_guard=200)
    with pytest.raises(ValueError):
        estimator.estimate(Spectrum(np.ones(10)), Note.E2)


def test_negative_guard_rejected():
    with pytest.raises(ValueError):
        FundamentalEstimator(harmonic_guard=-1)


def test_estimate_is_repeatable(sine_wave):
    spectrum = SpectralAnalyzer().analyze(AudioClip(sine_wave(98), 48000))
    estimator = FundamentalEstimator()
    assert estimator.estimate(spectrum, Note.G2) == estimator.estimate(spectrum, Note.G2)


class TestReliability:
    def test_clean_tone_is_reliable(self, sine_wave):
        spectrum = SpectralAnalyzer().analyze(AudioClip(sine_wave(110), 48000))
        estimator = FundamentalEstimator()
        index = estimator.estimate(spectrum, Note.A2)
        assert estimator.is_reliable(spectrum, index, Note.A2)

    def test_noise_is_not_reliable(self):
        rng = np.random.default_rng(0)
        spectrum = Spectrum(rng.random(500))
        estimator = FundamentalEstimator()
        index = estimator.estimate(spectrum, Note.A2)
        assert not estimator.is_reliable(spectrum, index, Note.A2)

    def test_silence_and_empty_are_not_reliable(self):
        estimator = FundamentalEstimator()
        assert not estimator.is_reliable(Spectrum(np.zeros(300)), 0, Note.E2)
        assert not estimator.is_reliable(Spectrum(np.zeros(0)), 0, Note.E2)

    def test_index_outside_window_is_not_reliable(self):
        spectrum = spectrum_with_peaks({200: 9.0})
        assert not FundamentalEstimator().is_reliable(spectrum, 200, Note.E2)
