"""TOML configuration for equalizers.

An equalizer is described by an ``[equalizer]`` table:

.. code-block:: toml

    [equalizer]
    sample_rate = 48000
    preset = "ten_band"
    gains = [-10.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 12.0]

or, with explicit bands:

.. code-block:: toml

    [equalizer]
    sample_rate = 44100
    bands = [100.0, 1000.0, 10000.0]
    gain_min_db = -12.0
    gain_max_db = 12.0
    q_factor = 1.41
    gains = [3.0, -2.5]

``gains`` may be shorter than the band list; the remaining bands stay at 0 dB.

"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from biquadfx.filter.equalizer import Equalizer
from biquadfx.logging import get_logger
from biquadfx.validation import ConfigurationError

logger = get_logger("config")

EQUALIZER_TABLE = "equalizer"


def load_toml(path: str | Path) -> dict[str, Any]:
    """Load a TOML file using stdlib ``tomllib`` (3.11+) or ``tomli``."""
    if sys.version_info >= (3, 11):
        import tomllib
    else:
        try:
            import tomli as tomllib
        except ImportError as exc:
            raise ImportError(
                "Python <3.11 requires the 'tomli' package for TOML support. "
                "Install it with: pip install tomli"
            ) from exc

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Could not parse {path}: {exc}") from exc


def load_equalizer_config(path: str | Path) -> Equalizer:
    """Build an :class:`Equalizer` from the ``[equalizer]`` table of a TOML file.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ConfigurationError
        If the table is missing or malformed.
    OutOfRangeGainError
        If a configured gain lies outside the gain bounds.

    """
    data = load_toml(path)
    table = data.get(EQUALIZER_TABLE)
    if not isinstance(table, dict):
        raise ConfigurationError(
            f"No [{EQUALIZER_TABLE}] table found in {path}",
            key=EQUALIZER_TABLE,
        )
    logger.debug("Loading equalizer from %s", path)
    return Equalizer.from_config(table)
