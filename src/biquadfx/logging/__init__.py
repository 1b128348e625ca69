"""Logging infrastructure for biquadfx.

The library is silent by default (a NullHandler is attached to the
``"biquadfx"`` logger). Filter construction, coefficient swaps and equalizer
band changes are logged at DEBUG level; per-sample processing never logs.

Configuration Functions
-----------------------
enable_debug_logging
    Enable DEBUG level logging to stderr.
enable_logging
    Enable logging at a specified level.
disable_logging
    Disable all biquadfx logging.
get_logger
    Get a logger for a specific biquadfx module.

Performance Logging
-------------------
log_performance
    Context manager for timing code blocks.
LogPerformance
    Decorator for timing function execution.

Examples
--------
>>> import biquadfx
>>> biquadfx.logging.enable_debug_logging()
>>> eq = biquadfx.Equalizer.ten_band(48000)
>>> eq.set_band_gain(9, 12.0)  # logs the band change

Standard Python logging configuration also works:

>>> import logging
>>> logging.getLogger("biquadfx").setLevel(logging.DEBUG)

"""

import logging

from biquadfx.logging.config import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_FORMAT,
    ROOT_LOGGER_NAME,
    disable_logging,
    enable_debug_logging,
    enable_logging,
    get_logger,
)
from biquadfx.logging.performance import (
    LogPerformance,
    log_performance,
)

# https://docs.python.org/3/howto/logging.html#configuring-logging-for-a-library
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    # Configuration
    "enable_debug_logging",
    "enable_logging",
    "disable_logging",
    "get_logger",
    # Performance
    "log_performance",
    "LogPerformance",
    # Constants
    "DEFAULT_FORMAT",
    "DEFAULT_DATE_FORMAT",
    "ROOT_LOGGER_NAME",
]
