"""Tests for impulse / frequency / phase response helpers."""

import math

import pytest
import torch

from biquadfx.analysis import (
    frequency_response,
    impulse_response,
    phase_response,
    response_bounds,
)
from biquadfx.filter import Equalizer, IIRFilter, make_allpass, make_lowpass, make_peak
from biquadfx.validation import InvalidRangeError

FS = 48000


class TestImpulseResponse:
    def test_identity_filter(self):
        response = impulse_response(IIRFilter(2), size=8)
        assert response.dtype == torch.float64
        assert response.tolist() == [1.0] + [0.0] * 7

    def test_matches_manual_loop(self):
        reference = make_lowpass(2000, FS)
        manual = [reference.process(1.0)] + [reference.process(0.0) for _ in range(63)]

        assert impulse_response(make_lowpass(2000, FS), size=64).tolist() == manual

    def test_advances_filter_state(self):
        filt = make_lowpass(2000, FS)
        impulse_response(filt, size=4)
        assert filt.input_history == [0.0, 0.0]
        assert filt.output_history != [0.0, 0.0]

    @pytest.mark.parametrize("size", [0, -3])
    def test_rejects_empty_size(self, size):
        with pytest.raises(InvalidRangeError):
            impulse_response(IIRFilter(2), size=size)


class TestFrequencyResponse:
    def test_one_bin_per_hertz_below_nyquist(self):
        gain_db = frequency_response(IIRFilter(2), FS)
        assert gain_db.shape == (FS // 2,)

    def test_identity_is_flat(self):
        gain_db = frequency_response(IIRFilter(2), FS)
        assert torch.allclose(gain_db, torch.zeros_like(gain_db), atol=1e-9)

    def test_lowpass_cutoff(self):
        gain_db = frequency_response(make_lowpass(5000, FS), FS)
        assert gain_db[5000].item() == pytest.approx(-3.0103, abs=0.01)
        assert gain_db[100].item() == pytest.approx(0.0, abs=0.01)
        assert gain_db[20000].item() < -20.0

    def test_peak_boost(self):
        gain_db = frequency_response(make_peak(1000, FS, 6.0), FS, size=4096)
        assert gain_db[1000].item() == pytest.approx(6.0, abs=0.01)

    def test_equalizer_bands(self):
        eq = Equalizer.ten_band(FS)
        eq.set_band_gain(0, -10.0)
        eq.set_band_gain(9, 12.0)

        gain_db = frequency_response(eq, FS, size=FS - 1)

        assert gain_db[15011].item() == pytest.approx(12.0, abs=0.05)
        assert gain_db[29].item() == pytest.approx(-10.0, abs=0.05)
        assert gain_db[1000].item() == pytest.approx(0.0, abs=0.05)

    def test_flat_equalizer_is_zero_db(self):
        gain_db = frequency_response(Equalizer.ten_band(FS), FS)
        assert torch.allclose(gain_db, torch.zeros_like(gain_db), atol=1e-9)

    def test_sample_rate_must_exceed_size(self):
        with pytest.raises(InvalidRangeError, match="exceed the impulse length"):
            frequency_response(IIRFilter(2), 256, size=512)


class TestPhaseResponse:
    def test_identity_has_no_phase_shift(self):
        phase = phase_response(IIRFilter(2), FS)
        assert torch.allclose(phase, torch.zeros_like(phase), atol=1e-12)

    def test_allpass_turns_by_pi_at_center(self):
        phase = phase_response(make_allpass(6000, FS), FS, size=4096)
        assert abs(phase[6000].item()) == pytest.approx(math.pi, abs=1e-3)
        assert phase.abs().max().item() <= math.pi

    def test_one_sample_delay_is_linear(self):
        delay = IIRFilter(1)
        delay.set_coefficients([1.0, 0.0], [0.0, 1.0])
        phase = phase_response(delay, FS)
        expected = -2.0 * math.pi * 1000 / FS
        assert phase[1000].item() == pytest.approx(expected, abs=1e-9)


class TestResponseBounds:
    def test_default_window(self):
        assert response_bounds(torch.tensor([100.0, 1.0, -1.0])) == (-20.0, 20.0)

    def test_grows_to_fit_and_ignores_dc(self):
        values = torch.tensor([500.0, -45.0, 3.0, 32.0])
        assert response_bounds(values) == (-45.0, 32.0)

    def test_ignores_non_finite(self):
        values = torch.tensor([0.0, -math.inf, 5.0, math.nan])
        assert response_bounds(values, floor=-6.0, ceiling=6.0) == (-6.0, 6.0)
