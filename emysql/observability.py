"""Statement observer primitives for execution events."""

import logging
from dataclasses import dataclass
from time import time
from typing import Any

from emysql.utils.logging import get_correlation_id, get_logger, log_with_context

__all__ = ("StatementEvent", "create_event", "default_statement_observer", "format_statement_event")


logger = get_logger("emysql.observability")


@dataclass(slots=True)
class StatementEvent:
    """Structured payload describing one prepared statement execution."""

    sql: str
    full_query: str
    type_string: str
    parameters: "list[Any]"
    driver: str
    succeeded: bool
    duration_s: float
    started_at: float
    correlation_id: "str | None"
    error: "str | None" = None

    def as_dict(self) -> "dict[str, Any]":
        return {
            "sql": self.sql,
            "full_query": self.full_query,
            "type_string": self.type_string,
            "parameters": self.parameters,
            "driver": self.driver,
            "succeeded": self.succeeded,
            "duration_s": self.duration_s,
            "started_at": self.started_at,
            "correlation_id": self.correlation_id,
            "error": self.error,
        }


def format_statement_event(event: StatementEvent) -> str:
    """Create a concise human-readable representation of a statement event."""

    status = "ok" if event.succeeded else f"failed: {event.error}"
    return f"[{event.driver}] execute ({status}, duration={event.duration_s:.6f}s)\nSQL: {event.full_query}"


def default_statement_observer(event: StatementEvent) -> None:
    """Log statement execution payload."""

    log_with_context(logger, logging.INFO, format_statement_event(event), **event.as_dict())


def create_event(
    *,
    sql: str,
    full_query: str,
    type_string: str,
    parameters: "list[Any]",
    driver: str,
    succeeded: bool,
    duration_s: float,
    error: "str | None" = None,
    started_at: "float | None" = None,
) -> StatementEvent:
    """Factory helper used by statements to build events."""

    return StatementEvent(
        sql=sql,
        full_query=full_query,
        type_string=type_string,
        parameters=parameters,
        driver=driver,
        succeeded=succeeded,
        duration_s=duration_s,
        started_at=started_at if started_at is not None else time(),
        correlation_id=get_correlation_id(),
        error=error,
    )
