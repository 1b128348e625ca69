"""Logger configuration utilities for biquadfx.

The package attaches a NullHandler to its root logger, so nothing is emitted
until an application opts in with :func:`enable_logging`.

"""

from __future__ import annotations

import logging
import sys
from typing import IO, Literal

#: Logger name all biquadfx loggers descend from
ROOT_LOGGER_NAME = "biquadfx"

#: Default format for biquadfx log messages
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

#: Default date format for timestamps
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for a biquadfx module.

    Parameters
    ----------
    name : str | None, optional
        Dotted module path below the package, e.g. ``"filter.equalizer"``.
        If None, the package root logger is returned.

    Examples
    --------
    >>> get_logger("filter.iir").name
    'biquadfx.filter.iir'

    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def enable_logging(
    level: LogLevel = "INFO",
    format_string: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    stream: IO[str] | None = None,
) -> None:
    """Route biquadfx log records to a stream.

    Parameters
    ----------
    level : {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}, optional
        The logging level to set. Default is "INFO".
    format_string : str, optional
        The format string for log messages.
    date_format : str, optional
        The date format for timestamps.
    stream : IO[str] | None, optional
        Destination stream. Default is ``sys.stderr``.

    Calling this again only changes the level; an existing stream handler is
    reused rather than duplicated.

    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level))

    for handler in logger.handlers[:]:
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    if stream_handlers:
        for handler in stream_handlers:
            handler.setLevel(getattr(logging, level))
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(getattr(logging, level))
    handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
    logger.addHandler(handler)


def enable_debug_logging(
    format_string: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> None:
    """Shortcut for ``enable_logging(level="DEBUG")``."""
    enable_logging(level="DEBUG", format_string=format_string, date_format=date_format)


def disable_logging() -> None:
    """Drop every handler from the biquadfx logger and restore the NullHandler."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
