"""Timing helpers for response analysis and long sample loops."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_perf_logger = logging.getLogger("biquadfx.performance")


@contextmanager
def log_performance(
    operation_name: str,
    level: int = logging.INFO,
    logger: logging.Logger | None = None,
) -> Iterator[dict[str, Any]]:
    """Log how long the enclosed block took.

    Parameters
    ----------
    operation_name : str
        Label used in the log message.
    level : int, optional
        The logging level for the timing message. Default is INFO.
    logger : logging.Logger | None, optional
        The logger to use. If None, uses ``biquadfx.performance``.

    Yields
    ------
    dict
        Filled with ``"operation_name"`` up front and ``"elapsed_seconds"``
        once the block exits.

    Examples
    --------
    >>> with log_performance("impulse_response") as timing:
    ...     for _ in range(48000):
    ...         eq.process(0.0)
    >>> timing["elapsed_seconds"]  # doctest: +SKIP

    """
    log = logger or _perf_logger
    timing_info: dict[str, Any] = {"operation_name": operation_name}

    start_time = time.perf_counter()
    try:
        yield timing_info
    finally:
        elapsed = time.perf_counter() - start_time
        timing_info["elapsed_seconds"] = elapsed
        log.log(level, "%s completed in %.3fs", operation_name, elapsed)


class LogPerformance:
    """Decorator that logs the execution time of every call.

    Parameters
    ----------
    operation_name : str | None, optional
        Label for the log message. Defaults to the function name.
    level : int, optional
        The logging level for timing messages. Default is INFO.
    logger : logging.Logger | None, optional
        The logger to use. If None, uses ``biquadfx.performance``.

    """

    def __init__(
        self,
        operation_name: str | None = None,
        level: int = logging.INFO,
        logger: logging.Logger | None = None,
    ) -> None:
        self.operation_name = operation_name
        self.level = level
        self.logger = logger or _perf_logger

    def __call__(self, func: F) -> F:
        name = self.operation_name or func.__name__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with log_performance(name, level=self.level, logger=self.logger):
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]
