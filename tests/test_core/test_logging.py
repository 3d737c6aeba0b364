"""
Tests for OneMax logging system.
"""

import pytest
import logging
import logging.handlers
import json
from onemax.core.logging import (
    setup_logging, get_logger, set_correlation_id,
    generate_correlation_id, log_with_correlation,
    CorrelationFilter, StructuredFormatter
)

pytestmark = [
    pytest.mark.core,
    pytest.mark.logging
]


def _make_record(msg="Test message", name="test_module", lineno=1):
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="test.py",
        lineno=lineno,
        msg=msg,
        args=(),
        exc_info=None
    )


def _correlation_filters():
    return [f for f in logging.getLogger().filters if isinstance(f, CorrelationFilter)]


class TestLoggingSetup:
    """Test logging setup and configuration."""

    @pytest.mark.unit
    def test_setup_logging_console_only(self):
        """Test setting up logging with console output only."""
        logger = setup_logging(level="DEBUG", enable_file=False, enable_console=True)

        assert logger is not None
        assert logger.level == logging.DEBUG

        console_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(console_handlers) > 0

    @pytest.mark.unit
    def test_setup_logging_file_only(self, temp_dir):
        """Test setting up logging with file output only."""
        log_file = temp_dir / "test.log"
        logger = setup_logging(
            level="INFO",
            log_file=log_file,
            enable_file=True,
            enable_console=False
        )

        assert logger.level == logging.INFO

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert log_file.exists()

    @pytest.mark.unit
    def test_setup_logging_writes_json_lines(self, temp_dir):
        """Test that the file handler writes structured JSON."""
        log_file = temp_dir / "json.log"
        logger = setup_logging(level="INFO", log_file=log_file, enable_file=True, enable_console=False)

        get_logger("onemax.test").info("hello")
        for handler in logger.handlers:
            handler.flush()

        lines = log_file.read_text().strip().splitlines()
        entries = [json.loads(line) for line in lines]
        assert any(entry["message"] == "hello" for entry in entries)

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    @pytest.mark.unit
    def test_setup_logging_does_not_stack_filters(self):
        """Test that repeated setup leaves a single correlation filter."""
        setup_logging(level="INFO", enable_file=False)
        setup_logging(level="INFO", enable_file=False)

        assert len(_correlation_filters()) == 1

    @pytest.mark.unit
    def test_get_logger(self):
        """Test getting a logger instance."""
        logger = get_logger("test_module")

        assert logger.name == "test_module"
        assert isinstance(logger, logging.Logger)


class TestCorrelationFilter:
    """Test correlation ID filtering."""

    @pytest.mark.unit
    def test_correlation_filter_creation(self):
        """Test creating a correlation filter."""
        filter_obj = CorrelationFilter()

        assert filter_obj.correlation_id is None

    @pytest.mark.unit
    def test_correlation_filter_filtering(self):
        """Test that correlation filter adds ID to records."""
        filter_obj = CorrelationFilter()
        filter_obj.set_correlation_id("test-456")

        record = _make_record()
        assert filter_obj.filter(record) is True
        assert record.correlation_id == "test-456"

    @pytest.mark.unit
    def test_correlation_filter_no_id(self):
        """Test correlation filter when no ID is set."""
        filter_obj = CorrelationFilter()

        record = _make_record()
        assert filter_obj.filter(record) is True
        assert not hasattr(record, 'correlation_id')

    @pytest.mark.unit
    def test_set_correlation_id_updates_root_filter(self):
        """Test that set_correlation_id reaches the installed filter."""
        setup_logging(level="INFO", enable_file=False)
        set_correlation_id("run-1")

        assert _correlation_filters()[0].correlation_id == "run-1"

    @pytest.mark.unit
    def test_generate_correlation_id_unique(self):
        """Test that generated IDs are unique."""
        assert generate_correlation_id() != generate_correlation_id()


class TestStructuredFormatter:
    """Test structured JSON formatter."""

    @pytest.mark.unit
    def test_structured_formatter_basic(self):
        """Test basic structured formatting."""
        formatter = StructuredFormatter()

        record = _make_record(lineno=42)
        record.funcName = "test_structured_formatter_basic"

        log_entry = json.loads(formatter.format(record))

        assert log_entry["level"] == "INFO"
        assert log_entry["logger"] == "test_module"
        assert log_entry["message"] == "Test message"
        assert log_entry["module"] == "test"
        assert log_entry["function"] == "test_structured_formatter_basic"
        assert log_entry["line"] == 42
        assert "timestamp" in log_entry

    @pytest.mark.unit
    def test_structured_formatter_extra_fields(self):
        """Test that extra fields are merged into the entry."""
        formatter = StructuredFormatter()

        record = _make_record()
        record.correlation_id = "abc"
        record.extra_fields = {"generation": 3}

        log_entry = json.loads(formatter.format(record))

        assert log_entry["correlation_id"] == "abc"
        assert log_entry["generation"] == 3


class TestLogWithCorrelation:
    """Test the correlation decorator."""

    @pytest.mark.unit
    def test_decorator_returns_result(self):
        """Test that the wrapped function's result is passed through."""
        @log_with_correlation
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"

    @pytest.mark.unit
    def test_decorator_reraises(self):
        """Test that exceptions propagate unchanged."""
        @log_with_correlation
        def fail():
            raise ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            fail()

    @pytest.mark.unit
    def test_decorator_sets_fresh_id_per_call(self):
        """Test that each call gets its own correlation ID."""
        setup_logging(level="INFO", enable_file=False)
        seen = []

        @log_with_correlation
        def capture():
            seen.append(_correlation_filters()[0].correlation_id)

        capture()
        capture()

        assert seen[0] is not None
        assert seen[0] != seen[1]
