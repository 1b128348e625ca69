"""Generic N-th order IIR recurrence.

An order-``k`` filter evaluates the difference equation

.. code-block:: text

    a0*y[n] = b0*x[n] + b1*x[n-1] + ... + bk*x[n-k]
                      - a1*y[n-1] - ... - ak*y[n-k]

one sample at a time, in Direct Form 1. The ``k`` most recent inputs and
outputs are kept newest-first; each call to :meth:`IIRFilter.process` shifts
them by one and drops the oldest.

Coefficients can be replaced while the filter is running. The delay lines are
left alone, which is what lets an equalizer change a band's gain mid-stream
without an audible click.

"""

from __future__ import annotations

from collections.abc import Sequence

from typing_extensions import override

from biquadfx.filter.__base import ProcessingBlock
from biquadfx.logging import get_logger
from biquadfx.validation import validate_coefficient_length, validate_filter_order

logger = get_logger("filter.iir")


class IIRFilter(ProcessingBlock):
    """IIR filter of fixed order.

    Parameters
    ----------
    order : int
        Number of past samples the recurrence looks at. Must be >= 1.

    Attributes
    ----------
    order : int
    a_coeffs : list[float]
        Feedback coefficients ``[a0, a1, ..., ak]`` (copy).
    b_coeffs : list[float]
        Feedforward coefficients ``[b0, b1, ..., bk]`` (copy).

    Notes
    -----
    A new filter is an identity pass-through: ``a0 = b0 = 1`` and every other
    coefficient and history slot is zero.

    This method works well with scipy's filter design functions:

    >>> import scipy.signal
    >>> b, a = scipy.signal.butter(2, 1000, btype="lowpass", fs=48000)
    >>> filt = IIRFilter(2)
    >>> filt.set_coefficients(a, b)

    """

    def __init__(self, order: int) -> None:
        validate_filter_order(order)
        self._order = order
        self._a_coeffs = [1.0] + [0.0] * order
        self._b_coeffs = [1.0] + [0.0] * order
        # x[n-1] ... x[n-k]
        self._input_history = [0.0] * order
        # y[n-1] ... y[n-k]
        self._output_history = [0.0] * order

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self._order}, a={self._a_coeffs}, b={self._b_coeffs})"

    @property
    def order(self) -> int:
        return self._order

    @property
    def a_coeffs(self) -> list[float]:
        return list(self._a_coeffs)

    @property
    def b_coeffs(self) -> list[float]:
        return list(self._b_coeffs)

    @property
    def input_history(self) -> list[float]:
        return list(self._input_history)

    @property
    def output_history(self) -> list[float]:
        return list(self._output_history)

    def set_coefficients(self, a_coeffs: Sequence[float], b_coeffs: Sequence[float]) -> None:
        """Replace the filter coefficients.

        Parameters
        ----------
        a_coeffs : Sequence[float]
            Feedback coefficients, either ``order + 1`` of them or ``order``
            with ``a0`` left out (it then defaults to 1.0).
        b_coeffs : Sequence[float]
            Feedforward coefficients, exactly ``order + 1`` of them.

        Raises
        ------
        InvalidCoefficientLengthError
            If either sequence has the wrong length. Nothing is modified.
        ValueError, TypeError
            If an element cannot be converted to float. Nothing is modified.

        """
        validate_coefficient_length(a_coeffs, "a_coeffs", self._order, allow_implicit_a0=True)
        validate_coefficient_length(b_coeffs, "b_coeffs", self._order)

        new_a = [float(c) for c in a_coeffs]
        new_b = [float(c) for c in b_coeffs]
        if len(new_a) == self._order:
            new_a.insert(0, 1.0)
        self._a_coeffs = new_a
        self._b_coeffs = new_b
        logger.debug("Coefficients set: a=%s b=%s", self._a_coeffs, self._b_coeffs)

    @override
    def process(self, sample: float) -> float:
        """Compute ``y[n]`` for input ``x[n] = sample`` and advance the delay lines.

        >>> filt = IIRFilter(2)
        >>> filt.process(0.0)
        0.0

        """
        a = self._a_coeffs
        b = self._b_coeffs
        xh = self._input_history
        yh = self._output_history

        # Index 0 is applied last, matching the reference recurrence.
        result = 0.0
        for i in range(1, self._order + 1):
            result += b[i] * xh[i - 1] - a[i] * yh[i - 1]
        result = (result + b[0] * sample) / a[0]

        xh.pop()
        xh.insert(0, sample)
        yh.pop()
        yh.insert(0, result)

        return result

    def reset_state(self) -> None:
        """Zero the delay lines, keeping the coefficients.

        Call when switching to an unrelated signal.
        """
        self._input_history = [0.0] * self._order
        self._output_history = [0.0] * self._order
