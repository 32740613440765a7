import logging

import pytest

from emysql.observability import create_event, default_statement_observer, format_statement_event
from emysql.utils.logging import set_correlation_id


def _event(**overrides: object):
    payload = {
        "sql": "SELECT ?",
        "full_query": "SELECT 'x'",
        "type_string": "s",
        "parameters": ["x"],
        "driver": "PyMysqlNativeStatement",
        "succeeded": True,
        "duration_s": 0.25,
    }
    payload.update(overrides)
    return create_event(**payload)  # type: ignore[arg-type]


def test_create_event_captures_correlation_id() -> None:
    set_correlation_id("abc")
    try:
        event = _event(started_at=10.0)
    finally:
        set_correlation_id(None)

    assert event.correlation_id == "abc"
    assert event.started_at == 10.0
    assert event.as_dict()["full_query"] == "SELECT 'x'"


def test_format_statement_event() -> None:
    assert format_statement_event(_event()) == (
        "[PyMysqlNativeStatement] execute (ok, duration=0.250000s)\nSQL: SELECT 'x'"
    )
    assert "failed: boom" in format_statement_event(_event(succeeded=False, error="boom"))


def test_default_statement_observer_logs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="emysql"):
        default_statement_observer(_event())

    assert any("SQL: SELECT 'x'" in record.getMessage() for record in caplog.records)
