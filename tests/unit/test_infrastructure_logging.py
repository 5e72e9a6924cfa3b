"""Unit tests for the structlog console adapter and id generator."""

import json

import pytest

from src.core.container import get_logger
from src.infrastructure.identifiers import Uuid7IdGenerator
from src.infrastructure.logging import ConsoleAdapter


def _json_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


@pytest.mark.unit
class TestConsoleAdapter:
    def test_json_output_carries_service_and_context(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="DEBUG", service="gw-test")

        logger.info("operation_created", operation_id="o1")

        event = _json_lines(capsys.readouterr().out)[-1]
        assert event["event"] == "operation_created"
        assert event["operation_id"] == "o1"
        assert event["service"] == "gw-test"
        assert event["level"] == "info"

    def test_error_adds_error_fields(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        logger.error("store_failed", error=RuntimeError("disk full"), table="apis")

        event = _json_lines(capsys.readouterr().out)[-1]
        assert event["error_type"] == "RuntimeError"
        assert event["error_message"] == "disk full"
        assert event["table"] == "apis"

    def test_level_filters_lower_events(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("hidden")
        logger.warning("shown")

        events = [e["event"] for e in _json_lines(capsys.readouterr().out)]
        assert "hidden" not in events
        assert "shown" in events

    def test_bind_returns_new_adapter(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        bound = logger.bind(api_id="a1")
        bound.info("bound_event")

        assert bound is not logger
        event = _json_lines(capsys.readouterr().out)[-1]
        assert event["api_id"] == "a1"

    def test_container_logger_is_singleton(self):
        assert get_logger() is get_logger()


@pytest.mark.unit
class TestUuid7IdGenerator:
    def test_ids_are_unique_canonical_strings(self):
        generator = Uuid7IdGenerator()

        ids = [generator.new_id() for _ in range(50)]

        assert len(set(ids)) == 50
        assert all(len(value) == 36 for value in ids)
