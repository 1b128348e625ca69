"""Reusable validation utilities for biquadfx.

All validators raise appropriate exceptions from
biquadfx.validation.exceptions and return ``None`` on success.

Examples
--------
>>> from biquadfx.validation import validate_sample_rate, validate_range
>>> validate_sample_rate(48000)  # OK
>>> validate_range(-6.0, "gain_db", min_value=-24.0, max_value=12.0)  # OK

"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, TypeVar

from biquadfx.validation.exceptions import (
    InvalidCoefficientLengthError,
    InvalidRangeError,
    InvalidSampleRateError,
    InvalidTypeError,
)

T = TypeVar("T", int, float)


# =============================================================================
# Constants
# =============================================================================

#: Common audio sample rates for reference and suggestions
COMMON_SAMPLE_RATES = (
    8000,
    11025,
    16000,
    22050,
    44100,
    48000,
    88200,
    96000,
    176400,
    192000,
)


# =============================================================================
# Sample Rate Validation
# =============================================================================


def validate_sample_rate(
    sample_rate: int,
    *,
    min_rate: int = 1,
    max_rate: int = 384000,
) -> None:
    """Validate a sample rate parameter.

    Parameters
    ----------
    sample_rate : int
        The sample rate to validate.
    min_rate : int, optional
        Minimum allowed sample rate in Hz. Default is 1.
    max_rate : int, optional
        Maximum allowed sample rate in Hz. Default is 384000.

    Raises
    ------
    InvalidSampleRateError
        If the sample rate is not an integer or is out of bounds.

    """
    if isinstance(sample_rate, bool) or not isinstance(sample_rate, int):
        raise InvalidSampleRateError(
            actual_value=sample_rate,
            suggestion=f"Got {type(sample_rate).__name__}, expected int",
        )

    if sample_rate < min_rate or sample_rate > max_rate:
        raise InvalidSampleRateError(
            actual_value=sample_rate,
            suggestion=(
                f"Must be between {min_rate} and {max_rate} Hz. Common rates: "
                + ", ".join(str(rate) for rate in COMMON_SAMPLE_RATES)
            ),
        )


# =============================================================================
# Range Validation
# =============================================================================


def validate_positive(
    value: T,
    parameter_name: str,
    *,
    allow_zero: bool = False,
) -> None:
    """Validate that a value is positive (or non-negative with ``allow_zero``)."""
    if allow_zero:
        if value < 0:
            raise InvalidRangeError(
                parameter_name=parameter_name,
                actual_value=value,
                min_value=0,
                min_inclusive=True,
            )
    elif value <= 0:
        raise InvalidRangeError(
            parameter_name=parameter_name,
            actual_value=value,
            min_value=0,
            min_inclusive=False,
        )


def validate_range(
    value: T,
    parameter_name: str,
    *,
    min_value: T | None = None,
    max_value: T | None = None,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
) -> None:
    """Validate that a value falls within a specified range.

    Parameters
    ----------
    value : int | float
        The value to validate.
    parameter_name : str
        Name of the parameter (for error messages).
    min_value : int | float | None, optional
        Minimum allowed value. None means no minimum.
    max_value : int | float | None, optional
        Maximum allowed value. None means no maximum.
    min_inclusive : bool, optional
        If True, min_value is included in the range. Default is True.
    max_inclusive : bool, optional
        If True, max_value is included in the range. Default is True.

    Raises
    ------
    InvalidRangeError
        If the value is outside the specified range.

    """
    below = min_value is not None and (
        value < min_value if min_inclusive else value <= min_value
    )
    above = max_value is not None and (
        value > max_value if max_inclusive else value >= max_value
    )
    if below or above:
        raise InvalidRangeError(
            parameter_name=parameter_name,
            actual_value=value,
            min_value=min_value,
            max_value=max_value,
            min_inclusive=min_inclusive,
            max_inclusive=max_inclusive,
        )


# =============================================================================
# Type Validation
# =============================================================================


def validate_type(
    value: Any,
    parameter_name: str,
    expected_types: type | tuple[type, ...],
) -> None:
    """Validate that a value has the expected type.

    Booleans are rejected where ``int`` is expected, since ``True`` is not a
    meaningful filter order or frequency.

    Raises
    ------
    InvalidTypeError
        If the value is not of the expected type.

    """
    if isinstance(expected_types, type):
        expected_types = (expected_types,)

    if (isinstance(value, bool) and bool not in expected_types) or not isinstance(
        value, expected_types
    ):
        raise InvalidTypeError(
            parameter_name=parameter_name,
            actual_type=type(value),
            expected_types=expected_types,
        )


# =============================================================================
# Filter-Specific Validators
# =============================================================================


def validate_filter_order(
    order: int,
    parameter_name: str = "order",
    *,
    min_order: int = 1,
    max_order: int | None = None,
) -> None:
    """Validate a filter order parameter.

    Raises
    ------
    InvalidTypeError
        If order is not an integer.
    InvalidRangeError
        If order is below ``min_order`` or above ``max_order``.

    Examples
    --------
    >>> validate_filter_order(2)  # OK
    >>> validate_filter_order(0)  # Raises InvalidRangeError

    """
    validate_type(order, parameter_name, int)
    validate_range(
        order,
        parameter_name,
        min_value=min_order,
        max_value=max_order,
    )


def validate_q_factor(
    q: float,
    parameter_name: str = "q_factor",
    *,
    min_q: float = 0.001,
    max_q: float | None = None,
) -> None:
    """Validate a Q factor (quality factor) parameter.

    Examples
    --------
    >>> validate_q_factor(0.707)  # OK
    >>> validate_q_factor(0)  # Raises InvalidRangeError

    """
    validate_type(q, parameter_name, (int, float))
    validate_positive(q, parameter_name)
    validate_range(q, parameter_name, min_value=min_q, max_value=max_q)


def validate_coefficient_length(
    coeffs: Sized,
    parameter_name: str,
    order: int,
    *,
    allow_implicit_a0: bool = False,
) -> None:
    """Validate that a coefficient sequence fits a filter of ``order``.

    Parameters
    ----------
    coeffs : Sized
        Coefficient sequence to check.
    parameter_name : str
        Name of the sequence (for error messages).
    order : int
        Filter order.
    allow_implicit_a0 : bool, optional
        If True, ``order`` elements are also accepted (the leading normalization
        coefficient is then implied to be 1.0). Default is False.

    Raises
    ------
    InvalidCoefficientLengthError
        If ``len(coeffs)`` is not an accepted length.

    """
    expected = (order + 1, order) if allow_implicit_a0 else (order + 1,)
    if len(coeffs) not in expected:
        raise InvalidCoefficientLengthError(
            parameter_name=parameter_name,
            order=order,
            expected_lengths=expected,
            actual_length=len(coeffs),
        )
