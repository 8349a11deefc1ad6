"""Unit tests for the structlog ConsoleAdapter."""

import json

from streetcode.infrastructure.logging.console_adapter import ConsoleAdapter


def read_entries(capsys) -> list[dict]:
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


def test_error_includes_exception_details(capsys):
    logger = ConsoleAdapter(use_json=True)

    logger.error(
        "Cannot update number in fact",
        error=RuntimeError("disk full"),
        request="ReorderFacts",
        streetcode_id=7,
    )

    [entry] = read_entries(capsys)
    assert entry["event"] == "Cannot update number in fact"
    assert entry["level"] == "error"
    assert entry["error_type"] == "RuntimeError"
    assert entry["error_message"] == "disk full"
    assert entry["request"] == "ReorderFacts"
    assert entry["streetcode_id"] == 7


def test_bind_adds_context_to_every_entry(capsys):
    logger = ConsoleAdapter(use_json=True, app_name="Streetcode").bind(request_id="r-1")

    logger.info("first")
    logger.warning("second")

    entries = read_entries(capsys)
    assert [e["event"] for e in entries] == ["first", "second"]
    assert all(e["request_id"] == "r-1" for e in entries)
    assert all(e["app"] == "Streetcode" for e in entries)


def test_level_filters_lower_entries(capsys):
    logger = ConsoleAdapter(use_json=True, level="WARNING")

    logger.debug("hidden")
    logger.info("hidden too")
    logger.warning("shown")

    assert [e["event"] for e in read_entries(capsys)] == ["shown"]
