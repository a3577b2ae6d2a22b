# -*- coding: utf-8 -*-
"""
Tests for the time-domain, frequency-domain and oversampling operations.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-12

Modified
--------
2026-02-12
"""

# Standard library
import array
import logging

# Third-party
import numpy as np
import pytest

# Lanczos Resample internal
import lanczos_resample
from lanczos_resample import (
    LanczosError,
    LanczosInterpolator,
    ValidationError,
    interpolate,
    oversample,
    oversampled_length,
    resample_frequency,
    resample_time,
    time_output_length,
)


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture
def sine_cycle():
    """One cycle of a discrete sine, sampled 4 times per cycle, twice."""
    return [0.0, 1.0, 0.0, -1.0, 0.0, 1.0, 0.0, -1.0]


@pytest.fixture
def random_signal():
    """50 reproducible random samples."""
    rng = np.random.RandomState(7)
    return rng.randn(50)


@pytest.fixture
def spectrum():
    """16 reproducible complex bins."""
    rng = np.random.RandomState(11)
    return rng.randn(16) + 1j * rng.randn(16)


# ── Time-domain resampling ──────────────────────────────────────────────


class TestTimeOutputLength:
    """Test the output length rule."""

    @pytest.mark.parametrize("n, src, tgt, expected", [
        (10, 1, 2, 19),   # 20.0 is exact -> decrement
        (10, 2, 1, 4),    # 5.0 is exact -> decrement
        (8, 8, 16, 15),
        (10, 5, 5, 9),    # equal rates still decrement
        (10, 3, 2, 6),    # 6.67 -> floor
        (7, 2, 3, 10),    # 10.5 -> floor
        (0, 1, 2, 0),     # empty input clamps at zero
    ])
    def test_length_rule(self, n, src, tgt, expected):
        assert time_output_length(n, src, tgt) == expected

    def test_resample_matches_rule(self, random_signal):
        for src, tgt in [(1, 2), (2, 1), (3, 7), (44100, 48000), (5, 5)]:
            y = resample_time(random_signal, src, tgt)
            assert len(y) == time_output_length(len(random_signal), src, tgt)

    def test_negative_length(self):
        with pytest.raises(ValidationError, match="input_length"):
            time_output_length(-1, 1, 2)


class TestResampleTime:
    """Test time-domain resampling."""

    def test_double_rate_scenario(self, sine_cycle):
        y = resample_time(sine_cycle, source_rate=8, target_rate=16)
        assert len(y) == 15
        # Even outputs sit on original samples
        np.testing.assert_allclose(y[0::2], sine_cycle[:8], atol=1e-12)
        # Between 0 and the first peak
        assert y[1] > 0.5

    def test_downsample_hits_samples(self, random_signal):
        y = resample_time(random_signal, 2, 1)
        np.testing.assert_allclose(
            y, random_signal[0:2 * len(y):2], atol=1e-12,
        )

    def test_matches_scalar_interpolate(self, random_signal):
        y = resample_time(random_signal, 3, 7)
        dx = 3 / 7
        for i in range(0, len(y), 9):
            assert y[i] == pytest.approx(
                interpolate(random_signal, i * dx), abs=1e-12,
            )

    def test_returns_new_float_array(self, random_signal):
        original = random_signal.copy()
        y = resample_time(random_signal, 1, 3)
        assert isinstance(y, np.ndarray)
        assert y.dtype == np.float64
        np.testing.assert_array_equal(random_signal, original)

    def test_empty_input(self):
        y = resample_time([], 1, 2)
        assert len(y) == 0

    def test_window_width_parameter(self, random_signal):
        y2 = resample_time(random_signal, 1, 2, a=2)
        y3 = resample_time(random_signal, 1, 2)
        assert len(y2) == len(y3)
        assert not np.allclose(y2[1::2], y3[1::2])

    @pytest.mark.parametrize("src, tgt", [(0, 1), (1, 0), (-2, 1), (1.5, 2), (True, 2)])
    def test_invalid_rates(self, src, tgt):
        with pytest.raises(ValidationError):
            resample_time([1.0, 2.0], src, tgt)

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="samples must be real"):
            resample_time([1 + 1j, 2.0], 1, 2)

    def test_invalid_a(self):
        with pytest.raises(ValidationError, match="a must be >= 1"):
            resample_time([1.0, 2.0], 1, 2, a=0)

    def test_rejects_2d(self):
        with pytest.raises(ValidationError, match="must be 1D"):
            resample_time(np.zeros((2, 2)), 1, 2)

    def test_logs_debug(self, random_signal, caplog):
        with caplog.at_level(logging.DEBUG, logger="lanczos_resample"):
            resample_time(random_signal, 1, 2)
        assert "Time resample: 50 -> 99 samples" in caplog.text


# ── Frequency-domain resampling ─────────────────────────────────────────


class TestResampleFrequency:
    """Test frequency-domain resampling."""

    @pytest.mark.parametrize("m", [1, 5, 16, 33, 100])
    def test_length(self, spectrum, m):
        assert len(resample_frequency(spectrum, m)) == m

    def test_identity_bin_count(self, spectrum):
        result = resample_frequency(spectrum, len(spectrum))
        np.testing.assert_allclose(result, spectrum, atol=1e-12)

    def test_parts_interpolated_independently(self, spectrum):
        m = 23
        result = resample_frequency(spectrum, m)
        positions = np.arange(m) * (len(spectrum) / m)
        interp = LanczosInterpolator(a=3)
        np.testing.assert_allclose(
            result.real, interp(spectrum.real.copy(), positions), atol=1e-15,
        )
        np.testing.assert_allclose(
            result.imag, interp(spectrum.imag.copy(), positions), atol=1e-15,
        )

    def test_real_input_stays_real(self):
        result = resample_frequency([1.0, 2.0, 3.0, 4.0], 7)
        np.testing.assert_array_equal(result.imag, 0.0)

    def test_dtype_and_input_untouched(self, spectrum):
        original = spectrum.copy()
        result = resample_frequency(spectrum, 8)
        assert result.dtype == np.complex128
        np.testing.assert_array_equal(spectrum, original)

    def test_accepts_python_complex(self):
        result = resample_frequency([1 + 1j, 2 - 1j, 0j], 3)
        np.testing.assert_allclose(result, [1 + 1j, 2 - 1j, 0j], atol=1e-12)

    def test_empty_input(self):
        result = resample_frequency([], 4)
        np.testing.assert_array_equal(result, np.zeros(4, dtype=complex))

    def test_no_length_decrement(self, spectrum):
        # 16 -> 32 is an exact ratio but no bin is dropped
        assert len(resample_frequency(spectrum, 32)) == 32

    @pytest.mark.parametrize("m", [0, -3, 2.0])
    def test_invalid_bin_count(self, spectrum, m):
        with pytest.raises(ValidationError, match="target_bin_count"):
            resample_frequency(spectrum, m)


# ── Oversampling ────────────────────────────────────────────────────────


class TestOversample:
    """Test fixed-factor oversampling into a caller buffer."""

    def test_scenario(self):
        source = [1.0, 2.0, 3.0]
        target = np.zeros(6)
        assert oversample(source, target, 2) is None
        assert target[0] == 1.0
        assert target[2] == 2.0
        assert target[4] == 3.0
        for i in (1, 3, 5):
            assert target[i] == pytest.approx(
                interpolate(source, i / 2), abs=1e-12,
            )
        assert 1.0 < target[1] < 2.0

    def test_exact_passthrough(self, random_signal):
        factor = 4
        target = np.zeros(oversampled_length(len(random_signal), factor))
        oversample(random_signal, target, factor)
        np.testing.assert_array_equal(target[::factor], random_signal)

    def test_interpolated_positions(self, random_signal):
        factor = 3
        target = np.zeros(len(random_signal) * factor)
        oversample(random_signal, target, factor)
        for i in range(1, len(target), 7):
            if i % factor:
                assert target[i] == pytest.approx(
                    interpolate(random_signal, i / factor), abs=1e-12,
                )

    def test_list_target(self):
        target = [0.0] * 6
        oversample([1.0, 2.0, 3.0], target, 2)
        assert len(target) == 6
        assert target[0::2] == [1.0, 2.0, 3.0]
        assert all(isinstance(v, float) for v in target)

    def test_array_module_target(self):
        target = array.array('d', [0.0] * 6)
        oversample([1.0, 2.0, 3.0], target, 2)
        assert len(target) == 6
        assert list(target[0::2]) == [1.0, 2.0, 3.0]
        assert target[1] == pytest.approx(
            interpolate([1.0, 2.0, 3.0], 0.5), abs=1e-12,
        )

    def test_factor_one_copies(self, random_signal):
        target = np.empty(len(random_signal))
        oversample(random_signal, target, 1)
        np.testing.assert_array_equal(target, random_signal)

    def test_short_target(self):
        target = np.zeros(3)
        oversample([1.0, 2.0, 3.0], target, 2)
        assert target[0] == 1.0
        assert target[2] == 2.0

    def test_target_too_long(self):
        with pytest.raises(ValidationError, match="exceeds"):
            oversample([1.0, 2.0, 3.0], np.zeros(7), 2)

    def test_source_untouched(self, random_signal):
        original = random_signal.copy()
        oversample(random_signal, np.zeros(100), 2)
        np.testing.assert_array_equal(random_signal, original)

    @pytest.mark.parametrize("factor", [0, -1, 1.5])
    def test_invalid_factor(self, factor):
        with pytest.raises(ValidationError, match="factor"):
            oversample([1.0], np.zeros(1), factor)

    def test_oversampled_length(self):
        assert oversampled_length(3, 2) == 6
        assert oversampled_length(0, 5) == 0


# ── Package surface ─────────────────────────────────────────────────────


class TestPackage:
    """Test the top-level package exports."""

    def test_version(self):
        assert lanczos_resample.__version__ == "0.1.0"

    def test_exception_hierarchy(self):
        assert issubclass(ValidationError, LanczosError)
        assert issubclass(ValidationError, ValueError)

    def test_all_exports_exist(self):
        for name in lanczos_resample.__all__:
            assert hasattr(lanczos_resample, name)
