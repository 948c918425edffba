"""Tests for structlog setup."""

from __future__ import annotations

import io
import json

import pytest
import structlog

from healthcord.observability.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def _lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestJsonOutput:
    def test_event_rendered_as_json(self) -> None:
        stream = io.StringIO()
        setup_logging("info", stream=stream)
        get_logger("tests").info("discord_notification_sent", status_code=204)

        (line,) = _lines(stream)
        assert line["event"] == "discord_notification_sent"
        assert line["component"] == "tests"
        assert line["status_code"] == 204
        assert line["level"] == "info"
        assert "ts" in line

    def test_defaults_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("info")
        get_logger("tests").info("to_stderr")

        captured = capsys.readouterr()
        assert "to_stderr" in captured.err
        assert captured.out == ""

    def test_initial_values_bound(self) -> None:
        stream = io.StringIO()
        setup_logging("info", stream=stream)
        get_logger("tests", provider="discord").warning("discord_non_success_response")

        (line,) = _lines(stream)
        assert line["provider"] == "discord"

    def test_exception_rendered_as_structured_traceback(self) -> None:
        stream = io.StringIO()
        setup_logging("info", stream=stream)
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            get_logger("tests").exception("send_failed")

        (line,) = _lines(stream)
        assert line["exception"][0]["exc_type"] == "RuntimeError"
        assert line["exception"][0]["exc_value"] == "boom"


class TestLevels:
    def test_level_filters_lower_events(self) -> None:
        stream = io.StringIO()
        setup_logging("warning", stream=stream)
        get_logger("tests").info("dropped")
        get_logger("tests").warning("kept")

        assert [line["event"] for line in _lines(stream)] == ["kept"]

    def test_unknown_level_falls_back_to_info(self) -> None:
        stream = io.StringIO()
        setup_logging("verbose", stream=stream)
        get_logger("tests").debug("dropped")
        get_logger("tests").info("kept")

        assert [line["event"] for line in _lines(stream)] == ["kept"]


class TestConsoleOutput:
    def test_key_value_rendering(self) -> None:
        stream = io.StringIO()
        setup_logging("debug", json_output=False, stream=stream)
        get_logger("tests").debug("secret_ref_resolved", env_var="FOO")

        output = stream.getvalue()
        assert "secret_ref_resolved" in output
        assert "env_var=FOO" in output
