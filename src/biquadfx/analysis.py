"""Impulse, magnitude and phase response of any :class:`ProcessingBlock`.

The block is characterized by feeding it a unit impulse through
``process`` and taking the FFT of the output, zero-padded to one second so
that FFT bin ``i`` corresponds to ``i`` Hz. Drawing the curves is left to the
caller.

These helpers advance the block's state. Pass a freshly designed filter, or
call ``reset_state()`` first, to get the response of the coefficients alone.

Examples
--------
>>> from biquadfx.analysis import frequency_response
>>> from biquadfx.filter import make_lowpass
>>> gain_db = frequency_response(make_lowpass(5000, 48000), 48000)
>>> round(gain_db[5000].item())  # -3 dB at the cutoff
-3

"""

from __future__ import annotations

import logging

import torch
from torch import Tensor

from biquadfx.filter.__base import ProcessingBlock
from biquadfx.logging import get_logger, log_performance
from biquadfx.validation import InvalidRangeError, validate_positive

logger = get_logger("analysis")

#: Impulse length used when none is given
DEFAULT_IMPULSE_SIZE = 512


def impulse_response(block: ProcessingBlock, size: int = DEFAULT_IMPULSE_SIZE) -> Tensor:
    """Feed ``1.0`` followed by ``size - 1`` zeros and collect the outputs.

    Returns
    -------
    Tensor
        1D float64 tensor of length ``size``.

    """
    validate_positive(size, "size")
    with log_performance(f"impulse_response[{size}]", level=logging.DEBUG, logger=logger):
        outputs = [block.process(1.0)]
        outputs.extend(block.process(0.0) for _ in range(size - 1))
    return torch.tensor(outputs, dtype=torch.float64)


def _spectrum(block: ProcessingBlock, sample_rate: int, size: int) -> Tensor:
    validate_positive(sample_rate, "sample_rate")
    if sample_rate <= size:
        raise InvalidRangeError(
            parameter_name="sample_rate",
            actual_value=sample_rate,
            min_value=size,
            min_inclusive=False,
            message="Sample rate must exceed the impulse length",
        )
    response = impulse_response(block, size)
    spectrum = torch.fft.rfft(response, n=sample_rate)
    return spectrum[: sample_rate // 2]


def frequency_response(
    block: ProcessingBlock,
    sample_rate: int,
    size: int = DEFAULT_IMPULSE_SIZE,
) -> Tensor:
    """Magnitude response in decibels, one value per Hz below Nyquist.

    Parameters
    ----------
    block : ProcessingBlock
        Filter or equalizer to measure.
    sample_rate : int
        Sample rate the block was designed for. Also the FFT length.
    size : int, optional
        Length of the impulse response that is transformed. Default is 512.

    Returns
    -------
    Tensor
        ``20*log10(|H|)`` for bins ``0 .. sample_rate//2 - 1``. Bins where the
        response is exactly zero come out as ``-inf``.

    """
    spectrum = _spectrum(block, sample_rate, size)
    return 20.0 * torch.log10(spectrum.abs())


def phase_response(
    block: ProcessingBlock,
    sample_rate: int,
    size: int = DEFAULT_IMPULSE_SIZE,
) -> Tensor:
    """Phase shift in radians, wrapped to ``[-pi, pi]``, one value per Hz."""
    spectrum = _spectrum(block, sample_rate, size)
    return torch.atan2(spectrum.imag, spectrum.real)


def response_bounds(
    values: Tensor,
    floor: float = -20.0,
    ceiling: float = 20.0,
) -> tuple[float, float]:
    """Axis limits for plotting a response curve.

    Bin 0 (DC) is ignored. The limits are at least ``[floor, ceiling]`` and
    grow to include every finite value.
    """
    finite = values[1:][torch.isfinite(values[1:])]
    if finite.numel() == 0:
        return floor, ceiling
    return min(floor, finite.min().item()), max(ceiling, finite.max().item())
