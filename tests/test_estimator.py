import numpy as np
import pytest

from freqcall.analysis.classifier import SignalClassifier, SignalShape
from freqcall.analysis.core import WaveSignal
from freqcall.analysis.estimator import FrequencyEstimator, estimate_frequency
from freqcall.analysis.synth import add_noise, modulated_wave, sine_wave, square_wave, triangle_wave


def _wave(values):
    return WaveSignal(time=np.arange(len(values), dtype=float), value=np.asarray(values, dtype=float))


def _estimate(values, **shape_kwargs):
    params = {"tolerance": 0.5, "amplitude_range": 1.0, "approx_period_points": 4}
    params.update(shape_kwargs)
    return FrequencyEstimator().estimate(_wave(values), SignalShape(**params))


def test_triangle_frequency(triangle):
    shape = SignalClassifier().classify(triangle)
    estimate = FrequencyEstimator().estimate(triangle, shape)

    # one fall onset per period, the first one at t=6
    assert estimate.event_times == [6.0 + 10 * k for k in range(10)]
    assert estimate.frequency_hz == pytest.approx(0.1)


def test_event_count_minus_one_normalization():
    # behavior pin: (events - 1) / (last - first)
    estimate = _estimate([0, 1, 0, 1, 0, 1, 0])

    assert estimate.event_times == [2.0, 4.0, 6.0]
    assert estimate.event_count == 3
    assert estimate.first_event_time == 2.0
    assert estimate.last_event_time == 6.0
    assert estimate.frequency_hz == pytest.approx((3 - 1) / (6.0 - 2.0))


def test_continuous_fall_is_counted_once():
    estimate = _estimate([3, 2, 1, 0])

    assert estimate.event_count == 1
    assert estimate.frequency_hz is None
    assert not estimate.is_known


def test_small_steps_stay_below_tolerance():
    estimate = _estimate([0, 0.4, 0, 0.4, 0, 0.4, 0])
    assert estimate.event_count == 0
    assert estimate.frequency_hz is None


def test_negative_sign_factor_counts_rises():
    estimate = _estimate([1, 0, 1, 0, 1], sign_factor=-1)
    assert estimate.event_times == [2.0, 4.0]
    assert estimate.frequency_hz == pytest.approx(0.5)


def test_clean_sine_frequency():
    wave = sine_wave(1.0, 10.0, 0.01)
    assert estimate_frequency(wave) == pytest.approx(1.0, rel=0.02)


def test_sampled_triangle_frequency():
    wave = triangle_wave(0.1, 100.0, 1.0)
    assert estimate_frequency(wave) == pytest.approx(0.1, rel=0.05)


def test_square_frequency():
    wave = square_wave(0.1, 100.0, 0.1)
    assert estimate_frequency(wave) == pytest.approx(0.1, rel=0.02)


def test_inverted_square_frequency():
    wave = square_wave(0.1, 100.0, 0.1)
    inverted = WaveSignal(time=wave.time, value=-wave.value)
    assert estimate_frequency(inverted) == pytest.approx(0.1, rel=0.02)


def test_modulated_frequency():
    wave = modulated_wave(1.0, 1.0 / 6, 6.0, 0.002)
    assert estimate_frequency(wave) == pytest.approx(1.0, rel=0.05)


def test_two_samples_frequency_unknown():
    assert estimate_frequency(_wave([0.0, 1.0])) is None


def test_empty_signal_frequency_unknown():
    assert estimate_frequency(_wave([])) is None


def test_raw_values_without_splice(triangle):
    shape = SignalShape(tolerance=0.1, amplitude_range=5.0, approx_period_points=45)
    pairs = list(FrequencyEstimator().effective_values(triangle, shape))
    assert pairs == list(zip(triangle.time.tolist(), triangle.value.tolist()))


def test_spliced_values_wait_for_both_filters():
    wave = _wave(np.sin(np.arange(100) / 5.0))
    shape = SignalShape(
        superposed=True, tolerance=0.01, amplitude_range=2.0, approx_period_points=31
    )
    pairs = list(FrequencyEstimator().effective_values(wave, shape))

    # median window 15 runs out after index 85, average window 41 starts at index 40
    assert len(pairs) == 46
    assert pairs[0][0] == 40.0
    assert pairs[-1][0] == 85.0


def test_filter_widths():
    noisy = SignalShape(noisy=True, tolerance=0.01, amplitude_range=2.0, approx_period_points=400)
    superposed = SignalShape(superposed=True, tolerance=0.01, amplitude_range=2.0, approx_period_points=400)
    plain = SignalShape(tolerance=0.01, amplitude_range=2.0, approx_period_points=400)

    assert FrequencyEstimator.median_half_width(noisy) == 10
    assert FrequencyEstimator.median_half_width(superposed) == 7
    assert FrequencyEstimator.median_half_width(plain) == 1
    assert FrequencyEstimator.average_half_width(2001, plain) == 20
    assert FrequencyEstimator.average_half_width(500, superposed) == 20
    assert FrequencyEstimator.average_half_width(2000, noisy) == 4


def test_noisy_sine_frequency():
    wave = add_noise(sine_wave(1.0, 10.0, 0.001), std=0.05, seed=0)
    shape = SignalClassifier().classify(wave)
    assert shape is not None and shape.splice

    frequency = FrequencyEstimator().estimate(wave, shape).frequency_hz
    assert frequency is not None
    assert frequency == pytest.approx(1.0, rel=0.05)


def test_noisy_median_width_follows_period_points():
    wave = _wave(np.sin(np.arange(100) / 5.0))
    estimator = FrequencyEstimator()

    for period_points, median_window in [(400, 21), (800, 41)]:
        shape = SignalShape(
            noisy=True, tolerance=0.01, amplitude_range=2.0, approx_period_points=period_points
        )
        pairs = list(estimator.effective_values(wave, shape))

        # average window 9 starts at index 8, the median window runs out at 100 - window
        assert pairs[0][0] == 8.0
        assert pairs[-1][0] == float(100 - median_window)


class _FixedValues(FrequencyEstimator):
    def __init__(self, values):
        self.values = values

    def effective_values(self, signal, shape):
        yield from enumerate(self.values)


def test_spliced_wave_unblocks_only_on_reversal():
    # after the fall at t=1 a small step (t=2) does not unblock a spliced wave
    values = [2.0, 1.0, 0.8, 0.0, 1.0, 0.0]
    spliced = SignalShape(superposed=True, tolerance=0.5, amplitude_range=2.0, approx_period_points=4)
    raw = SignalShape(tolerance=0.5, amplitude_range=2.0, approx_period_points=4)
    wave = _wave(values)

    assert _FixedValues(values).estimate(wave, spliced).event_times == [1, 5]
    assert _FixedValues(values).estimate(wave, raw).event_times == [1, 3, 5]
    assert FrequencyEstimator.unblock_level(spliced) == -0.5
    assert FrequencyEstimator.unblock_level(raw) == 0.5
