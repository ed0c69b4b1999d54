"""
Unit tests for logging setup.
"""

import io
import json
import logging
from pathlib import Path

import pytest

from go_ts_generator.analyzer.aggregator import TypeAggregator
from go_ts_generator.logging_config import configure_logging, get_logger


def json_lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_verbose_enables_package_debug(self) -> None:
        """Test that only the package logger drops to DEBUG."""
        configure_logging(verbose=True, stream=io.StringIO())

        assert logging.getLogger("go_ts_generator").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        """Test that the root logger keeps a single handler."""
        configure_logging(stream=io.StringIO())
        handler = configure_logging(log_json=True, stream=io.StringIO())

        assert logging.getLogger().handlers == [handler]

    def test_json_progress_events(self, models_root: Path) -> None:
        """Test per-root progress rendered as JSON lines with their values."""
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)

        TypeAggregator([models_root]).collect()

        events = {record["event"]: record for record in json_lines(stream)}
        extracted = events["root.extracted"]
        assert extracted["source_dir"] == str(models_root)
        assert extracted["declarations"] == 6
        assert extracted["registered"] == 6
        assert extracted["level"] == "debug"
        assert extracted["logger"] == "go_ts_generator.analyzer.aggregator"
        assert "timestamp" in extracted
        assert events["root.correlated"]["usages"] == 0
        assert events["collect.complete"]["roots"] == 1

    def test_json_stdlib_records(self) -> None:
        """Test that plain stdlib records share the JSON layout."""
        stream = io.StringIO()
        configure_logging(log_json=True, stream=stream)

        logging.getLogger("go_ts_generator.parser").warning("Skipping %s", "a.go")

        [record] = json_lines(stream)
        assert record["event"] == "Skipping a.go"
        assert record["level"] == "warning"
        assert record["logger"] == "go_ts_generator.parser"

    def test_quiet_by_default(self, models_root: Path) -> None:
        """Test that progress events are hidden without verbose."""
        stream = io.StringIO()
        configure_logging(stream=stream)

        TypeAggregator([models_root]).collect()

        assert stream.getvalue() == ""


class TestGetLogger:
    """Tests for get_logger."""

    def test_values_become_record_attributes(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that keyword values reach stdlib handlers as record attributes."""
        with caplog.at_level(logging.INFO, logger="go_ts_generator"):
            get_logger("go_ts_generator.example").info("root.extracted", declarations=3)

        [record] = caplog.records
        assert record.getMessage() == "root.extracted"
        assert record.declarations == 3
        assert record.name == "go_ts_generator.example"
