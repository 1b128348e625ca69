"""Custom exceptions for biquadfx validation and error handling.

Every error raised by the library carries its context (offending parameter,
received value, expectation and an optional hint) so a surrounding tool can
report it verbatim and abort only the requested operation.

Exception Hierarchy
-------------------
BiquadFXError (base)
    Base exception for all biquadfx library errors.
InvalidParameterError
    Raised when a parameter value is invalid.
InvalidSampleRateError
    Raised when sample rate is invalid.
InvalidTypeError
    Raised when a parameter has wrong type.
InvalidCoefficientLengthError
    Raised when a coefficient sequence does not match the filter order.
InvalidRangeError
    Raised when a value is out of range.
OutOfRangeGainError
    Raised when an equalizer band gain is outside the configured bounds.
ConfigurationError
    Raised when an equalizer configuration is malformed.

Examples
--------
Catch all biquadfx errors:

>>> try:
...     eq.set_band_gain(0, 40.0)
... except BiquadFXError as e:
...     print(f"biquadfx error: {e}")

"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class BiquadFXError(Exception):
    """Base exception for all biquadfx library errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    parameter_name : str | None, optional
        Name of the parameter that caused the error, if applicable.
    actual_value : Any | None, optional
        The actual value that caused the error.
    suggestion : str | None, optional
        A suggestion for fixing the error.

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        actual_value: Any | None = None,
        suggestion: str | None = None,
    ) -> None:
        self.message = message
        self.parameter_name = parameter_name
        self.actual_value = actual_value
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with context."""
        parts = [self.message]
        if self.parameter_name is not None:
            parts.append(f"Parameter: {self.parameter_name}")
        if self.actual_value is not None:
            parts.append(f"Got: {self.actual_value!r}")
        if self.suggestion is not None:
            parts.append(f"Suggestion: {self.suggestion}")
        return " | ".join(parts)


class InvalidParameterError(BiquadFXError):
    """Exception raised when a parameter value is invalid.

    This is the base class for all parameter validation errors.
    Use more specific subclasses when possible.

    Parameters
    ----------
    message : str
        Human-readable error message.
    parameter_name : str
        Name of the invalid parameter.
    actual_value : Any
        The actual value that was provided.
    expected : str | None, optional
        Description of what was expected.
    suggestion : str | None, optional
        A suggestion for fixing the error.

    Examples
    --------
    >>> raise InvalidParameterError(
    ...     "Equalizer needs at least one band",
    ...     parameter_name="bands",
    ...     actual_value=[],
    ...     expected="non-empty sequence of frequencies",
    ... )
    Traceback (most recent call last):
        ...
    biquadfx.validation.exceptions.InvalidParameterError: ...

    """

    def __init__(
        self,
        message: str,
        parameter_name: str,
        actual_value: Any,
        expected: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        self.expected = expected
        super().__init__(
            message=message,
            parameter_name=parameter_name,
            actual_value=actual_value,
            suggestion=suggestion,
        )

    def _format_message(self) -> str:
        """Format the full error message with context."""
        parts = [self.message]
        parts.append(f"Parameter: {self.parameter_name}")
        parts.append(f"Got: {self.actual_value!r}")
        if self.expected is not None:
            parts.append(f"Expected: {self.expected}")
        if self.suggestion is not None:
            parts.append(f"Suggestion: {self.suggestion}")
        return " | ".join(parts)


class InvalidSampleRateError(InvalidParameterError):
    """Exception raised when sample rate is invalid.

    Parameters
    ----------
    actual_value : Any
        The invalid sample rate value.
    suggestion : str | None, optional
        A suggestion for fixing the error.

    """

    def __init__(
        self,
        actual_value: Any,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(
            message="Sample rate must be a positive integer",
            parameter_name="sample_rate",
            actual_value=actual_value,
            expected="positive integer (e.g., 44100, 48000)",
            suggestion=suggestion or "Common sample rates: 44100, 48000, 96000 Hz",
        )


class InvalidTypeError(InvalidParameterError):
    """Exception raised when a parameter has an invalid type."""

    def __init__(
        self,
        parameter_name: str,
        actual_type: type,
        expected_types: tuple[type, ...],
    ) -> None:
        expected_names = ", ".join(t.__name__ for t in expected_types)
        super().__init__(
            message=f"Invalid type for {parameter_name}",
            parameter_name=parameter_name,
            actual_value=actual_type.__name__,
            expected=expected_names,
        )


class InvalidCoefficientLengthError(InvalidParameterError):
    """Exception raised when a coefficient sequence has the wrong length.

    An order-``k`` filter needs ``k + 1`` feedforward coefficients and either
    ``k`` or ``k + 1`` feedback coefficients.

    Parameters
    ----------
    parameter_name : str
        Which coefficient sequence was rejected (``"a_coeffs"`` or ``"b_coeffs"``).
    order : int
        Order of the filter the coefficients were meant for.
    expected_lengths : Sequence[int]
        Accepted lengths.
    actual_length : int
        Length that was received.

    Examples
    --------
    >>> raise InvalidCoefficientLengthError("b_coeffs", 2, (3,), 2)
    Traceback (most recent call last):
        ...
    biquadfx.validation.exceptions.InvalidCoefficientLengthError: ...

    """

    def __init__(
        self,
        parameter_name: str,
        order: int,
        expected_lengths: Sequence[int],
        actual_length: int,
    ) -> None:
        self.order = order
        self.expected_lengths = tuple(expected_lengths)
        self.actual_length = actual_length
        expected = " or ".join(str(n) for n in self.expected_lengths)
        super().__init__(
            message=f"Expected {parameter_name} to have {expected} elements for {order}-order filter",
            parameter_name=parameter_name,
            actual_value=f"{actual_length} elements",
            expected=f"{expected} elements",
        )


class InvalidRangeError(InvalidParameterError):
    """Exception raised when a value is outside expected bounds.

    Parameters
    ----------
    parameter_name : str
        Name of the parameter.
    actual_value : float | int
        The actual value that was provided.
    min_value : float | int | None, optional
        Minimum allowed value. None means no minimum.
    max_value : float | int | None, optional
        Maximum allowed value. None means no maximum.
    min_inclusive : bool, optional
        If True, min_value is included in the range. Default is True.
    max_inclusive : bool, optional
        If True, max_value is included in the range. Default is True.
    message : str | None, optional
        Overrides the default ``"Value out of range for <name>"`` message.

    """

    def __init__(
        self,
        parameter_name: str,
        actual_value: float | int,
        min_value: float | int | None = None,
        max_value: float | int | None = None,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
        message: str | None = None,
    ) -> None:
        self.min_value = min_value
        self.max_value = max_value

        left = "[" if min_inclusive else "("
        right = "]" if max_inclusive else ")"
        min_str = str(min_value) if min_value is not None else "-inf"
        max_str = str(max_value) if max_value is not None else "inf"
        expected = f"{left}{min_str}, {max_str}{right}"

        super().__init__(
            message=message or f"Value out of range for {parameter_name}",
            parameter_name=parameter_name,
            actual_value=actual_value,
            expected=expected,
        )


class OutOfRangeGainError(InvalidRangeError):
    """Exception raised when an equalizer band gain is outside its bounds.

    Parameters
    ----------
    gain_db : float
        The rejected gain in decibels.
    gain_min_db, gain_max_db : float
        The inclusive bounds configured on the equalizer.

    Examples
    --------
    >>> raise OutOfRangeGainError(20.0, -24.0, 12.0)
    Traceback (most recent call last):
        ...
    biquadfx.validation.exceptions.OutOfRangeGainError: ...

    """

    def __init__(self, gain_db: float, gain_min_db: float, gain_max_db: float) -> None:
        super().__init__(
            parameter_name="gain_db",
            actual_value=gain_db,
            min_value=gain_min_db,
            max_value=gain_max_db,
            message=(
                f"Invalid gain value {gain_db}, must be in the interval "
                f"[{gain_min_db}, {gain_max_db}]"
            ),
        )


class ConfigurationError(BiquadFXError):
    """Exception raised when an equalizer configuration cannot be used.

    Parameters
    ----------
    message : str
        Human-readable error message.
    key : str | None, optional
        The configuration key at fault.
    suggestion : str | None, optional
        A suggestion for fixing the error.

    """

    def __init__(
        self,
        message: str,
        key: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        self.key = key
        super().__init__(message=message, parameter_name=key, suggestion=suggestion)
