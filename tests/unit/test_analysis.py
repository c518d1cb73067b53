"""Test filter analysis helpers."""

import math

import numpy as np
import pytest

from fixed_ema.components.signal_processing.analysis import (
    alpha,
    cutoff_frequency,
    frequency_response,
    pole,
    quantization_error,
    reference_response,
    settling_steps,
    time_constant,
)


class TestCoefficients:
    """Test alpha and pole."""

    def test_alpha_and_pole(self) -> None:
        """Test alpha = 2^-K and pole = 1 - alpha."""
        assert alpha(4) == 0.0625
        assert pole(4) == 0.9375
        assert alpha(0) == 1.0

    def test_negative_shift(self) -> None:
        """Test that K < 0 is rejected."""
        with pytest.raises(ValueError):
            alpha(-1)

    def test_float_shift(self) -> None:
        """Test that K must be an integer."""
        with pytest.raises(TypeError):
            alpha(2.5)


class TestCutoffFrequency:
    """Test the -3 dB cutoff."""

    def test_passthrough_is_nyquist(self) -> None:
        """Test that K=0 puts the cutoff at Nyquist."""
        assert cutoff_frequency(0, sample_rate=100.0) == 50.0

    def test_gain_at_cutoff(self) -> None:
        """Test that the magnitude response is 1/sqrt(2) at the cutoff."""
        fc = cutoff_frequency(4)
        freqs, magnitude = frequency_response(4, n_points=4096)

        assert np.interp(fc, freqs, magnitude) == pytest.approx(1 / math.sqrt(2), rel=1e-3)

    def test_scales_with_sample_rate(self) -> None:
        """Test that the cutoff is proportional to the sample rate."""
        assert cutoff_frequency(4, 1000.0) == pytest.approx(1000.0 * cutoff_frequency(4, 1.0))

    def test_larger_shift_lowers_cutoff(self) -> None:
        """Test that heavier smoothing means a lower cutoff."""
        cutoffs = [cutoff_frequency(k) for k in range(1, 8)]

        assert all(a > b for a, b in zip(cutoffs, cutoffs[1:]))


class TestFrequencyResponse:
    """Test the magnitude response."""

    def test_unity_dc_gain(self) -> None:
        """Test that DC passes unchanged."""
        freqs, magnitude = frequency_response(3, n_points=256, sample_rate=50.0)

        assert freqs[0] == 0.0
        assert magnitude[0] == pytest.approx(1.0)
        assert freqs[-1] < 25.0

    def test_monotonic_rolloff(self) -> None:
        """Test that the single pole attenuates monotonically."""
        _, magnitude = frequency_response(3)

        assert np.all(np.diff(magnitude) <= 0)


class TestTimeConstant:
    """Test tau."""

    def test_time_constant(self) -> None:
        """Test tau = -T / ln(1 - alpha)."""
        assert time_constant(4) == pytest.approx(-1 / math.log(15 / 16))
        assert time_constant(4, sample_period=0.01) == pytest.approx(-0.01 / math.log(15 / 16))

    def test_passthrough(self) -> None:
        """Test that K=0 has no lag."""
        assert time_constant(0) == 0.0


class TestSettlingSteps:
    """Test the closed-form settling bound."""

    def test_k4_amplitude_100(self) -> None:
        """Test ceil(ln(100 * 2^8) / -ln(15/16))."""
        assert settling_steps(4, 100) == 158

    def test_symmetric(self) -> None:
        """Test that the bound depends on |x| only."""
        assert settling_steps(4, -100) == settling_steps(4, 100)

    def test_trivial_cases(self) -> None:
        """Test zero amplitude and the passthrough filter."""
        assert settling_steps(4, 0) == 1
        assert settling_steps(0, 1000) == 1

    def test_grows_with_shift(self) -> None:
        """Test that heavier smoothing needs more calls."""
        assert settling_steps(2, 100) < settling_steps(4, 100) < settling_steps(6, 100)


class TestReferenceResponse:
    """Test the floating-point model."""

    def test_constant_input(self) -> None:
        """Test y[n] = 0.5 x[n] + 0.5 y[n-1]."""
        y = reference_response(1, [16, 16, 16, 16, 16])

        assert y.tolist() == pytest.approx([8.0, 12.0, 14.0, 15.0, 15.5])

    def test_initial_output(self) -> None:
        """Test that initial sets y[-1]."""
        y = reference_response(1, [16], initial=10.0)

        assert y[0] == pytest.approx(13.0)


class TestQuantizationError:
    """Test fixed-point fidelity against the model."""

    def test_step_response(self) -> None:
        """Test that the fixed-point step stays within one unit of the model."""
        errors = quantization_error(4, np.full(400, 100))

        assert errors["max_abs_error"] < 1.0
        assert abs(errors["final_error"]) < 1e-6

    def test_empty(self) -> None:
        """Test that an empty signal has no error."""
        assert quantization_error(4, [])["max_abs_error"] == 0.0
