"""Unit tests for structured logging setup."""

from typing import Iterator

import numpy as np
import pytest
import structlog

from rendermath.config.schema import LoggingConfig, LogLevel
from rendermath.logging.setup import (
    _add_run_id,
    _plain_numbers,
    configure_from_settings,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging and configure_from_settings."""

    def test_console_processors(self) -> None:
        """Test the development renderer."""
        configure_logging("DEBUG")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_processors(self) -> None:
        """Test the production renderer."""
        configure_logging("INFO", run_id="run-1", json_format=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_from_settings(self) -> None:
        """Test configuring from a LoggingConfig model."""
        configure_from_settings(
            LoggingConfig(level=LogLevel.WARNING, run_id="bench", json_format=True)
        )
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_get_logger(self) -> None:
        """Test that a bound logger is returned."""
        configure_logging("INFO")
        logger = get_logger("rendermath.test")
        assert hasattr(logger, "info")


class TestRunIdProcessor:
    """Tests for the run_id processor."""

    def test_adds_run_id(self) -> None:
        """Test that every event carries the run identifier."""
        processor = _add_run_id("abc123")
        event = processor(None, "info", {"event": "numerics_configured"})
        assert event["run_id"] == "abc123"
        assert event["event"] == "numerics_configured"


class TestPlainNumbersProcessor:
    """Tests for numpy value conversion in events."""

    def test_converts_numpy_values(self) -> None:
        """Test scalars, arrays and tuples read from matrix storage."""
        event = _plain_numbers(
            None,
            "debug",
            {
                "event": "singular_matrix_inverted",
                "determinant": np.float32(0.0),
                "row": np.array([1.0, 2.0], dtype=np.float32),
                "scale": (np.float64(2.0), 0.0, 1.5),
            },
        )
        assert type(event["determinant"]) is float
        assert event["row"] == [1.0, 2.0]
        assert event["scale"] == (2.0, 0.0, 1.5)
        assert type(event["scale"][0]) is float
        assert event["event"] == "singular_matrix_inverted"
