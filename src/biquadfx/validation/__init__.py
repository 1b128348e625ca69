"""Input validation utilities for biquadfx.

This module provides custom exceptions and validation functions for
parameter validation across biquadfx.

Exceptions
----------
BiquadFXError
    Base exception for all biquadfx errors.
InvalidParameterError
    Raised when a parameter value is invalid.
InvalidSampleRateError
    Raised when sample rate is invalid.
InvalidTypeError
    Raised when a parameter has wrong type.
InvalidCoefficientLengthError
    Raised when coefficient sequences do not fit the filter order.
InvalidRangeError
    Raised when a value is out of range.
OutOfRangeGainError
    Raised when an equalizer band gain is outside its bounds.
ConfigurationError
    Raised when an equalizer configuration is malformed.

Validators
----------
validate_sample_rate
    Validate sample rate parameters.
validate_positive
    Validate positive values.
validate_range
    Validate values within a range.
validate_type
    Validate parameter types.
validate_filter_order
    Validate filter order parameters.
validate_q_factor
    Validate Q factor parameters.
validate_coefficient_length
    Validate coefficient sequence lengths against a filter order.

"""

from biquadfx.validation.exceptions import (
    BiquadFXError,
    ConfigurationError,
    InvalidCoefficientLengthError,
    InvalidParameterError,
    InvalidRangeError,
    InvalidSampleRateError,
    InvalidTypeError,
    OutOfRangeGainError,
)
from biquadfx.validation.validators import (
    COMMON_SAMPLE_RATES,
    validate_coefficient_length,
    validate_filter_order,
    validate_positive,
    validate_q_factor,
    validate_range,
    validate_sample_rate,
    validate_type,
)

__all__ = [
    # Exceptions
    "BiquadFXError",
    "InvalidParameterError",
    "InvalidSampleRateError",
    "InvalidTypeError",
    "InvalidCoefficientLengthError",
    "InvalidRangeError",
    "OutOfRangeGainError",
    "ConfigurationError",
    # Validators
    "validate_sample_rate",
    "validate_positive",
    "validate_range",
    "validate_type",
    "validate_filter_order",
    "validate_q_factor",
    "validate_coefficient_length",
    # Constants
    "COMMON_SAMPLE_RATES",
]
