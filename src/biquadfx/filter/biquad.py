"""Biquad (second-order IIR) filter design.

Each ``make_*`` function turns musical/acoustic parameters into the six
coefficients of a second-order recurrence and returns a freshly constructed
:class:`~biquadfx.filter.iir.IIRFilter`. The functions are independent of
each other and keep no state.

Transfer function of every design::

    H(z) = (b0 + b1*z^-1 + b2*z^-2) / (a0 + a1*z^-1 + a2*z^-2)

Functions
---------
make_lowpass, make_highpass, make_bandpass, make_allpass, make_notch
    Shapes controlled by frequency and Q only.
make_peak, make_lowshelf, make_highshelf
    Shapes that also take a gain in decibels.
make_peak_eq_constant_q
    Constant-Q peaking section used for equalizer bands.

Notes
-----
The only recognized option is ``q_factor``; when it is ``None`` the
Butterworth value :data:`DEFAULT_Q_FACTOR` (``1/sqrt(2)``) is used.

Inputs are not validated. A frequency at or above Nyquist, or a zero Q, yields
non-finite coefficients; keeping parameters sane is up to the caller.

The cookbook designs leave ``a0`` un-normalized, so ``process`` divides by it
on every sample. Operations are ordered so that the coefficients are
reproducible bit for bit.

References
----------
.. [1] Bristow-Johnson, R. "Cookbook formulae for audio EQ biquad filter
       coefficients." https://webaudio.github.io/Audio-EQ-Cookbook/audio-eq-cookbook.html
.. [2] TheAlgorithms, Python, ``audio_filters/butterworth_filter.py``.
       https://github.com/TheAlgorithms/Python/tree/master/audio_filters

"""

from __future__ import annotations

import math

from biquadfx.filter.iir import IIRFilter
from biquadfx.logging import get_logger

logger = get_logger("filter.biquad")

#: Q giving a maximally flat (Butterworth) response
DEFAULT_Q_FACTOR = 1.0 / math.sqrt(2.0)

BIQUAD_ORDER = 2


def _resolve_q(q_factor: float | None) -> float:
    return DEFAULT_Q_FACTOR if q_factor is None else q_factor


def _compute_omega_alpha(
    frequency: float,
    sample_rate: int,
    q_factor: float,
) -> tuple[float, float, float, float]:
    """Compute angular frequency components for biquad design.

    Returns
    -------
    tuple[float, float, float, float]
        ``(w0, sin_w0, cos_w0, alpha)`` where ``w0 = 2*pi*frequency/sample_rate``
        and ``alpha = sin(w0) / (2*Q)``.

    """
    w0 = math.tau * frequency / sample_rate
    sin_w0 = math.sin(w0)
    cos_w0 = math.cos(w0)
    alpha = sin_w0 / (2.0 * q_factor)
    return w0, sin_w0, cos_w0, alpha


def _build(kind: str, a_coeffs: list[float], b_coeffs: list[float]) -> IIRFilter:
    filt = IIRFilter(BIQUAD_ORDER)
    filt.set_coefficients(a_coeffs, b_coeffs)
    logger.debug("Designed %s biquad", kind)
    return filt


def make_lowpass(frequency: float, sample_rate: int, q_factor: float | None = None) -> IIRFilter:
    """Second-order low-pass filter.

    Passes frequencies below ``frequency`` and rolls off at 12 dB/octave above.

    >>> filt = make_lowpass(1000, 48000)
    >>> filt.a_coeffs + filt.b_coeffs  # doctest: +NORMALIZE_WHITESPACE
    [1.0922959556412573, -1.9828897227476208, 0.9077040443587427,
     0.004277569313094809, 0.008555138626189618, 0.004277569313094809]

    """
    _, _, cos_w0, alpha = _compute_omega_alpha(frequency, sample_rate, _resolve_q(q_factor))

    b0 = (1.0 - cos_w0) / 2.0
    b1 = 1.0 - cos_w0

    a0 = 1.0 + alpha
    a1 = -2.0 * cos_w0
    a2 = 1.0 - alpha

    return _build("lowpass", [a0, a1, a2], [b0, b1, b0])


def make_highpass(frequency: float, sample_rate: int, q_factor: float | None = None) -> IIRFilter:
    """Second-order high-pass filter (12 dB/octave below ``frequency``)."""
    _, _, cos_w0, alpha = _compute_omega_alpha(frequency, sample_rate, _resolve_q(q_factor))

    b0 = (1.0 + cos_w0) / 2.0
    b1 = -1.0 - cos_w0

    a0 = 1.0 + alpha
    a1 = -2.0 * cos_w0
    a2 = 1.0 - alpha

    return _build("highpass", [a0, a1, a2], [b0, b1, b0])


def make_bandpass(frequency: float, sample_rate: int, q_factor: float | None = None) -> IIRFilter:
    """Band-pass filter with a peak gain of ``sin(w0)/2`` (constant skirt gain)."""
    _, sin_w0, cos_w0, alpha = _compute_omega_alpha(frequency, sample_rate, _resolve_q(q_factor))

    b0 = sin_w0 / 2.0
    b1 = 0.0
    b2 = -b0

    a0 = 1.0 + alpha
    a1 = -2.0 * cos_w0
    a2 = 1.0 - alpha

    return _build("bandpass", [a0, a1, a2], [b0, b1, b2])


def make_allpass(frequency: float, sample_rate: int, q_factor: float | None = None) -> IIRFilter:
    """All-pass filter: unity magnitude, phase turning through ``frequency``.

    The feedback coefficients are the feedforward ones in reverse order.
    """
    _, _, cos_w0, alpha = _compute_omega_alpha(frequency, sample_rate, _resolve_q(q_factor))

    b0 = 1.0 - alpha
    b1 = -2.0 * cos_w0
    b2 = 1.0 + alpha

    return _build("allpass", [b2, b1, b0], [b0, b1, b2])


def make_peak(
    frequency: float,
    sample_rate: int,
    gain_db: float,
    q_factor: float | None = None,
) -> IIRFilter:
    """Peaking EQ: boost or cut of ``gain_db`` centered on ``frequency``.

    ``A = 10^(gain_db/40)`` scales ``alpha`` up in the numerator and down in
    the denominator.
    """
    _, _, cos_w0, alpha = _compute_omega_alpha(frequency, sample_rate, _resolve_q(q_factor))
    big_a = 10.0 ** (gain_db / 40.0)

    b0 = 1.0 + alpha * big_a
    b1 = -2.0 * cos_w0
    b2 = 1.0 - alpha * big_a
    a0 = 1.0 + alpha / big_a
    a1 = -2.0 * cos_w0
    a2 = 1.0 - alpha / big_a

    return _build("peak", [a0, a1, a2], [b0, b1, b2])


def _shelf_terms(
    frequency: float,
    sample_rate: int,
    gain_db: float,
    q_factor: float | None,
) -> tuple[float, float, float, float, float, float]:
    """Intermediate shelving terms ``(A, pmc, ppmc, mpc, pmpc, aa2)``.

    ``p``/``m`` stand for plus/minus: ``pmc = (A+1) - (A-1)*cos(w0)`` and so on.
    """
    _, _, cos_w0, alpha = _compute_omega_alpha(frequency, sample_rate, _resolve_q(q_factor))
    big_a = 10.0 ** (gain_db / 40.0)
    pmc = (big_a + 1.0) - (big_a - 1.0) * cos_w0
    ppmc = (big_a + 1.0) + (big_a - 1.0) * cos_w0
    mpc = (big_a - 1.0) - (big_a + 1.0) * cos_w0
    pmpc = (big_a - 1.0) + (big_a + 1.0) * cos_w0
    aa2 = 2.0 * math.sqrt(big_a) * alpha
    return big_a, pmc, ppmc, mpc, pmpc, aa2


def make_lowshelf(
    frequency: float,
    sample_rate: int,
    gain_db: float,
    q_factor: float | None = None,
) -> IIRFilter:
    """Low shelf: ``gain_db`` applied below ``frequency``, unity above."""
    big_a, pmc, ppmc, mpc, pmpc, aa2 = _shelf_terms(frequency, sample_rate, gain_db, q_factor)

    b0 = big_a * (pmc + aa2)
    b1 = 2.0 * big_a * mpc
    b2 = big_a * (pmc - aa2)
    a0 = ppmc + aa2
    a1 = -2.0 * pmpc
    a2 = ppmc - aa2

    return _build("lowshelf", [a0, a1, a2], [b0, b1, b2])


def make_highshelf(
    frequency: float,
    sample_rate: int,
    gain_db: float,
    q_factor: float | None = None,
) -> IIRFilter:
    """High shelf: ``gain_db`` applied above ``frequency``, unity below.

    Mirrors :func:`make_lowshelf` with the boost and cut terms swapped.
    """
    big_a, pmc, ppmc, mpc, pmpc, aa2 = _shelf_terms(frequency, sample_rate, gain_db, q_factor)

    b0 = big_a * (ppmc + aa2)
    b1 = -2.0 * big_a * pmpc
    b2 = big_a * (ppmc - aa2)
    a0 = pmc + aa2
    a1 = 2.0 * mpc
    a2 = pmc - aa2

    return _build("highshelf", [a0, a1, a2], [b0, b1, b2])


def make_notch(frequency: float, sample_rate: int, q_factor: float | None = None) -> IIRFilter:
    """Notch (band-reject) filter with a null at ``frequency``.

    Here ``q_factor`` acts as a bandwidth in octaves:
    ``alpha = sin(w0) * sinh(ln(2)/2 * BW * w0/sin(w0))``.
    """
    bandwidth = _resolve_q(q_factor)
    w0, sin_w0, cos_w0, _ = _compute_omega_alpha(frequency, sample_rate, bandwidth)
    alpha = sin_w0 * math.sinh((math.log(2.0) / 2.0) * bandwidth * (w0 / sin_w0))

    b0 = 1.0
    b1 = -2.0 * cos_w0

    a0 = 1.0 + alpha
    a1 = -2.0 * cos_w0
    a2 = 1.0 - alpha

    return _build("notch", [a0, a1, a2], [b0, b1, b0])


def make_peak_eq_constant_q(
    frequency_center: float,
    sample_rate: int,
    gain_db: float,
    q_factor: float | None = None,
) -> IIRFilter:
    """Constant-Q peaking section for graphic equalizer bands.

    Bandwidth stays the same for boosts and cuts. Designed with the bilinear
    prewarp ``k = tan(pi*f/fs)``; the linear gain ``v0`` is always >= 1 and
    moves to the numerator for a boost (``gain_db > 0``) or to the
    denominator for a cut. ``a0`` is normalized away, so only ``[a1, a2]`` is
    handed to the filter.

    The two branches are not sign flips of each other. At ``gain_db = 0``
    the cut branch is taken with ``v0 = 1`` and reduces exactly to an
    identity section (``b0 = 1``, ``b1 = a1``, ``b2 = a2``).

    """
    q = _resolve_q(q_factor)
    k = math.tan((math.pi * frequency_center) / sample_rate)
    k_sqr = k * k
    v0 = 10.0 ** (gain_db / 20.0)

    if v0 < 1.0:
        v0 = 1.0 / v0

    if gain_db > 0.0:
        norm = 1.0 + ((1.0 / q) * k) + k_sqr
        b0 = (1.0 + ((v0 / q) * k) + k_sqr) / norm
        b1 = (2.0 * (k_sqr - 1.0)) / norm
        b2 = (1.0 - ((v0 / q) * k) + k_sqr) / norm
        a1 = b1
        a2 = (1.0 - ((1.0 / q) * k) + k_sqr) / norm
    else:
        norm = 1.0 + ((v0 / q) * k) + k_sqr
        b0 = (1.0 + ((1.0 / q) * k) + k_sqr) / norm
        b1 = (2.0 * (k_sqr - 1.0)) / norm
        b2 = (1.0 - ((1.0 / q) * k) + k_sqr) / norm
        a1 = b1
        a2 = (1.0 - ((v0 / q) * k) + k_sqr) / norm

    return _build("constant-Q peak", [a1, a2], [b0, b1, b2])
