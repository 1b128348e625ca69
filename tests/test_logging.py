"""Tests for biquadfx logging module."""

import io
import logging
import time

import pytest

from biquadfx.filter import Equalizer, IIRFilter, make_lowpass
from biquadfx.logging import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_FORMAT,
    LogPerformance,
    disable_logging,
    enable_debug_logging,
    enable_logging,
    get_logger,
    log_performance,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    disable_logging()


class TestLoggerConfiguration:
    """Tests for logger configuration functions."""

    def test_get_logger_root(self):
        assert get_logger().name == "biquadfx"

    def test_get_logger_child(self):
        assert get_logger("filter.iir").name == "biquadfx.filter.iir"

    def test_enable_logging_default_level(self):
        enable_logging()
        assert get_logger().level == logging.INFO

    def test_enable_logging_custom_level(self):
        enable_logging(level="WARNING")
        assert get_logger().level == logging.WARNING

    def test_enable_debug_logging(self):
        enable_debug_logging()
        assert get_logger().level == logging.DEBUG

    def test_disable_logging(self):
        enable_logging()
        disable_logging()
        logger = get_logger()
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)
        assert logger.level == logging.NOTSET

    def test_null_handler_by_default(self):
        logger = logging.getLogger("biquadfx")
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_custom_stream_and_format(self):
        stream = io.StringIO()
        enable_logging(level="INFO", format_string="%(levelname)s: %(message)s", stream=stream)
        get_logger().info("Test")
        assert "INFO: Test" in stream.getvalue()

    def test_multiple_enable_calls_no_duplicate_handlers(self):
        enable_logging()
        enable_logging()
        enable_logging(level="DEBUG")
        logger = get_logger()
        stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert stream_handlers[0].level == logging.DEBUG

    def test_default_format_constants(self):
        assert "%(message)s" in DEFAULT_FORMAT
        assert "%Y" in DEFAULT_DATE_FORMAT


class TestLibraryMessages:
    """Filters and equalizers report structural changes at DEBUG level."""

    def test_equalizer_band_change_is_logged(self):
        stream = io.StringIO()
        enable_logging(level="DEBUG", format_string="%(name)s %(message)s", stream=stream)

        eq = Equalizer.ten_band(48000)
        eq.set_band_gain(9, 12.0)

        output = stream.getvalue()
        assert "biquadfx.filter.equalizer Equalizer created: 10 bands at 48000 Hz" in output
        assert "Band 9 (15011.0 Hz) set to 12.0 dB" in output

    def test_design_is_logged(self):
        stream = io.StringIO()
        enable_logging(level="DEBUG", format_string="%(name)s %(message)s", stream=stream)

        make_lowpass(1000, 48000)

        assert "biquadfx.filter.biquad Designed lowpass biquad" in stream.getvalue()

    def test_processing_is_silent(self):
        stream = io.StringIO()
        filt = IIRFilter(2)
        enable_logging(level="DEBUG", stream=stream)

        for _ in range(10):
            filt.process(1.0)

        assert stream.getvalue() == ""

    def test_silent_when_not_enabled(self, capsys):
        Equalizer.ten_band(48000).set_band_gain(0, -3.0)
        captured = capsys.readouterr()
        assert captured.err == ""
        assert captured.out == ""


class TestPerformanceLogging:
    """Tests for performance logging utilities."""

    def test_log_performance_context_manager(self):
        stream = io.StringIO()
        enable_logging(level="INFO", stream=stream)

        with log_performance("impulse"):
            pass

        assert "impulse completed in" in stream.getvalue()

    def test_log_performance_returns_timing_info(self):
        with log_performance("test") as timing:
            time.sleep(0.01)

        assert timing["operation_name"] == "test"
        assert timing["elapsed_seconds"] >= 0.01

    def test_log_performance_records_time_on_error(self):
        with pytest.raises(RuntimeError):
            with log_performance("failing") as timing:
                raise RuntimeError("boom")
        assert "elapsed_seconds" in timing

    def test_log_performance_decorator(self):
        stream = io.StringIO()
        enable_logging(level="INFO", stream=stream)

        @LogPerformance("decorated_func")
        def test_func():
            return 42

        assert test_func() == 42
        assert "decorated_func completed in" in stream.getvalue()

    def test_log_performance_decorator_auto_name(self):
        stream = io.StringIO()
        enable_logging(level="INFO", stream=stream)

        @LogPerformance()
        def my_function(a, b, c=0):
            return a + b + c

        assert my_function(1, 2, c=3) == 6
        assert my_function.__name__ == "my_function"
        assert "my_function completed in" in stream.getvalue()

    def test_log_performance_custom_level(self):
        stream = io.StringIO()
        enable_logging(level="WARNING", stream=stream)

        with log_performance("test", level=logging.INFO):
            pass
        assert stream.getvalue() == ""

        with log_performance("test", level=logging.WARNING):
            pass
        assert "test completed in" in stream.getvalue()

    def test_log_performance_custom_logger(self):
        stream = io.StringIO()
        custom_logger = logging.getLogger("custom_test")
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        custom_logger.addHandler(handler)
        custom_logger.setLevel(logging.INFO)

        try:
            with log_performance("operation", logger=custom_logger):
                pass
        finally:
            custom_logger.removeHandler(handler)

        assert "custom_test: operation completed in" in stream.getvalue()

    def test_performance_logger_hierarchy(self):
        perf_logger = logging.getLogger("biquadfx.performance")
        assert perf_logger.parent.name == "biquadfx"  # type: ignore[union-attr]


class TestImports:
    def test_import_via_package(self):
        import biquadfx

        assert hasattr(biquadfx, "logging")
        assert hasattr(biquadfx.logging, "enable_debug_logging")
        assert hasattr(biquadfx.logging, "log_performance")
        assert hasattr(biquadfx.logging, "get_logger")
