"""Multi-band graphic equalizer built from constant-Q peaking sections.

An :class:`Equalizer` owns one order-2 :class:`~biquadfx.filter.iir.IIRFilter`
per band and feeds every sample through them in band order. Changing a
band's gain designs a new section and copies only its coefficients into the
running filter, so the delay lines carry on undisturbed and the change does
not click.

Examples
--------
>>> from biquadfx.filter import Equalizer
>>> eq = Equalizer.ten_band(48000)
>>> eq.set_band_gain(0, -10.0)
>>> eq.set_band_gain(9, 12.0)
>>> out = [eq.process(x) for x in signal]

"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from typing_extensions import Self, override

from biquadfx.filter.__base import ProcessingBlock
from biquadfx.filter.biquad import make_peak_eq_constant_q
from biquadfx.filter.iir import IIRFilter
from biquadfx.logging import get_logger
from biquadfx.validation import (
    ConfigurationError,
    InvalidParameterError,
    InvalidRangeError,
    OutOfRangeGainError,
    validate_positive,
    validate_q_factor,
    validate_sample_rate,
    validate_type,
)

logger = get_logger("filter.equalizer")

#: Center frequencies (Hz) of the 10-band preset
TEN_BAND_FREQUENCIES = (29.0, 59.0, 119.0, 237.0, 474.0, 947.0, 1889.0, 3770.0, 7523.0, 15011.0)

DEFAULT_GAIN_MAX_DB = 12.0
DEFAULT_GAIN_MIN_DB = -24.0
#: ~2.828, about half an octave per band
DEFAULT_EQ_Q_FACTOR = 2.0 * math.sqrt(2.0)

_BAND_LAYOUT_KEYS = ("gain_min_db", "gain_max_db", "q_factor")


def _config_value(
    config: Mapping[str, Any],
    key: str,
    types: tuple[type, ...],
    default: Any = None,
) -> Any:
    value = config.get(key, default)
    if isinstance(value, bool) or not isinstance(value, types):
        raise ConfigurationError(
            f"'{key}' must be {' or '.join(t.__name__ for t in types)}, got {value!r}",
            key=key,
        )
    return value


class Equalizer(ProcessingBlock):
    """Cascade of constant-Q peaking filters with per-band gain control.

    Parameters
    ----------
    sample_rate : int
        Sampling frequency in Hz.
    bands : Sequence[float]
        Center frequency of each band in Hz. Order is kept and defines the
        cascade order.
    gain_min_db, gain_max_db : float
        Inclusive bounds for :meth:`set_band_gain`.
    q_factor : float
        Quality factor shared by every band.

    Raises
    ------
    InvalidParameterError
        If the band list is empty or any argument is structurally invalid.

    """

    def __init__(
        self,
        sample_rate: int,
        bands: Sequence[float],
        gain_min_db: float,
        gain_max_db: float,
        q_factor: float,
    ) -> None:
        validate_sample_rate(sample_rate)
        if len(bands) == 0:
            raise InvalidParameterError(
                "Equalizer needs at least one band",
                parameter_name="bands",
                actual_value=list(bands),
                expected="non-empty sequence of center frequencies",
            )
        for frequency in bands:
            validate_type(frequency, "bands", (int, float))
            validate_positive(frequency, "bands")
        validate_type(gain_min_db, "gain_min_db", (int, float))
        validate_type(gain_max_db, "gain_max_db", (int, float))
        if not gain_min_db <= gain_max_db:
            raise InvalidRangeError(
                parameter_name="gain_min_db",
                actual_value=gain_min_db,
                max_value=gain_max_db,
                message="gain_min_db must not exceed gain_max_db",
            )
        validate_q_factor(q_factor)

        self._sample_rate = sample_rate
        self._bands = tuple(float(f) for f in bands)
        self._band_gains = [0.0] * len(self._bands)
        self._gain_min_db = float(gain_min_db)
        self._gain_max_db = float(gain_max_db)
        self._q_factor = float(q_factor)
        self._band_filters = [
            make_peak_eq_constant_q(frequency, sample_rate, 0.0, self._q_factor)
            for frequency in self._bands
        ]
        logger.debug(
            "Equalizer created: %d bands at %d Hz, gain range [%s, %s] dB, Q=%s",
            len(self._bands),
            sample_rate,
            self._gain_min_db,
            self._gain_max_db,
            self._q_factor,
        )

    @classmethod
    def ten_band(cls, sample_rate: int) -> Self:
        """10-band equalizer, bands one octave apart from 29 Hz to 15 kHz.

        Gains range from -24 dB to +12 dB and every band uses ``Q = 2*sqrt(2)``.
        """
        return cls(
            sample_rate,
            TEN_BAND_FREQUENCIES,
            gain_min_db=DEFAULT_GAIN_MIN_DB,
            gain_max_db=DEFAULT_GAIN_MAX_DB,
            q_factor=DEFAULT_EQ_Q_FACTOR,
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Self:
        """Build an equalizer from a configuration mapping.

        Recognized keys: ``sample_rate`` (required), either ``preset``
        (only ``"ten_band"``) or ``bands``, then ``gain_min_db``,
        ``gain_max_db``, ``q_factor`` and ``gains``. A preset fixes its own
        bounds and Q, so those three keys are only allowed with ``bands``.
        Gains are applied band by band through :meth:`set_band_gain`.

        Raises
        ------
        ConfigurationError
            On missing keys, unknown presets, conflicting keys or bad types.
        OutOfRangeGainError
            If a configured gain lies outside the gain bounds.

        """
        if "sample_rate" not in config:
            raise ConfigurationError("Equalizer configuration needs a sample rate", key="sample_rate")
        sample_rate = _config_value(config, "sample_rate", (int,))

        preset = config.get("preset")
        if preset is not None:
            if "bands" in config:
                raise ConfigurationError(
                    "Use either 'preset' or 'bands', not both",
                    key="preset",
                )
            if preset != "ten_band":
                raise ConfigurationError(
                    f"Unknown equalizer preset {preset!r}",
                    key="preset",
                    suggestion="Available presets: 'ten_band'",
                )
            for key in _BAND_LAYOUT_KEYS:
                if key in config:
                    raise ConfigurationError(
                        f"'{key}' cannot be combined with a preset",
                        key=key,
                        suggestion="Use an explicit 'bands' list to customise it",
                    )
            equalizer = cls.ten_band(sample_rate)
        else:
            bands = config.get("bands")
            if not isinstance(bands, (list, tuple)):
                raise ConfigurationError(
                    "Equalizer configuration needs a 'bands' list or a 'preset'",
                    key="bands",
                )
            equalizer = cls(
                sample_rate,
                bands,
                gain_min_db=_config_value(config, "gain_min_db", (int, float), DEFAULT_GAIN_MIN_DB),
                gain_max_db=_config_value(config, "gain_max_db", (int, float), DEFAULT_GAIN_MAX_DB),
                q_factor=_config_value(config, "q_factor", (int, float), DEFAULT_EQ_Q_FACTOR),
            )

        gains = config.get("gains", [])
        if not isinstance(gains, (list, tuple)) or len(gains) > equalizer.band_count:
            raise ConfigurationError(
                f"'gains' must be a list of at most {equalizer.band_count} values",
                key="gains",
            )
        for index, gain_db in enumerate(gains):
            if isinstance(gain_db, bool) or not isinstance(gain_db, (int, float)):
                raise ConfigurationError(
                    f"Gain for band {index} must be a number, got {gain_db!r}",
                    key="gains",
                )
            equalizer.set_band_gain(index, gain_db)

        return equalizer

    def __len__(self) -> int:
        return len(self._bands)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sample_rate={self._sample_rate}, bands={list(self._bands)}, "
            f"gains={self._band_gains})"
        )

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def bands(self) -> tuple[float, ...]:
        return self._bands

    @property
    def band_gains(self) -> tuple[float, ...]:
        return tuple(self._band_gains)

    @property
    def band_count(self) -> int:
        return len(self._bands)

    @property
    def gain_min_db(self) -> float:
        return self._gain_min_db

    @property
    def gain_max_db(self) -> float:
        return self._gain_max_db

    @property
    def q_factor(self) -> float:
        return self._q_factor

    @property
    def band_filters(self) -> tuple[IIRFilter, ...]:
        """The per-band filters, in cascade order."""
        return tuple(self._band_filters)

    def _check_index(self, index: int) -> None:
        # Negative indices are not accepted, unlike sequence indexing
        if not 0 <= index < len(self._bands):
            raise IndexError(f"band index {index} out of range for {len(self._bands)} bands")

    def get_band_frequency(self, index: int) -> float:
        self._check_index(index)
        return self._bands[index]

    def get_band_gain(self, index: int) -> float:
        self._check_index(index)
        return self._band_gains[index]

    def set_band_gain(self, index: int, gain_db: float) -> None:
        """Change one band's gain without resetting its delay line.

        Parameters
        ----------
        index : int
            Band index in ``[0, band_count)``.
        gain_db : float
            New gain in decibels, within ``[gain_min_db, gain_max_db]``.

        Raises
        ------
        OutOfRangeGainError
            If ``gain_db`` is outside the bounds. No state is changed.
        IndexError
            If ``index`` is not a valid band index.

        """
        self._check_index(index)
        # Written positively so NaN is rejected too
        if not (self._gain_min_db <= gain_db <= self._gain_max_db):
            raise OutOfRangeGainError(gain_db, self._gain_min_db, self._gain_max_db)

        self._band_gains[index] = float(gain_db)
        self._change_filter(index)
        logger.debug("Band %d (%s Hz) set to %s dB", index, self._bands[index], gain_db)

    def _change_filter(self, index: int) -> None:
        designed = make_peak_eq_constant_q(
            self._bands[index],
            self._sample_rate,
            self._band_gains[index],
            self._q_factor,
        )
        self._band_filters[index].set_coefficients(designed.a_coeffs, designed.b_coeffs)

    @override
    def process(self, sample: float) -> float:
        for band_filter in self._band_filters:
            sample = band_filter.process(sample)
        return sample

    def reset_state(self) -> None:
        """Zero every band's delay line; gains and coefficients are kept."""
        for band_filter in self._band_filters:
            band_filter.reset_state()
