"""Unit tests for correlation IDs and structlog configuration."""

import json
import logging

import pytest
import structlog

from printflow.infrastructure.observability import (
    configure_structlog,
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


@pytest.fixture(autouse=True)
def reset_logging():
    root_level = logging.getLogger().level
    set_correlation_id("")
    yield
    set_correlation_id("")
    structlog.reset_defaults()
    logging.getLogger().setLevel(root_level)


class TestCorrelationId:
    def test_generate_is_unique(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()

    def test_set_and_get(self) -> None:
        set_correlation_id("req-123")
        assert get_correlation_id() == "req-123"

    def test_processor_adds_id_when_set(self) -> None:
        set_correlation_id("req-123")
        event = correlation_id_processor(None, "info", {"event": "x"})
        assert event["correlation_id"] == "req-123"

    def test_processor_skips_when_unset(self) -> None:
        event = correlation_id_processor(None, "info", {"event": "x"})
        assert "correlation_id" not in event


class TestConfigureStructlog:
    def test_production_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production", log_level="INFO")
        set_correlation_id("req-9")

        structlog.get_logger().info("task_created", task_id="t-1")

        entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert entry["event"] == "task_created"
        assert entry["level"] == "info"
        assert entry["correlation_id"] == "req-9"
        assert entry["task_id"] == "t-1"
        assert "timestamp" in entry
        assert entry["service"] == "printflow"

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production", log_level="WARNING")

        structlog.get_logger().info("quiet")

        assert capsys.readouterr().out == ""
