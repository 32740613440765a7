"""Logging helpers for emysql.

All package loggers live under the ``emysql`` namespace. Statement logs attach
``full_query``, ``type_string`` and ``driver`` as structured fields, which
:class:`StructuredFormatter` lifts into top-level JSON keys.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import IO, TYPE_CHECKING, Any, Final

from emysql._serialization import encode_json

if TYPE_CHECKING:
    from collections.abc import Iterable
    from logging import LogRecord

__all__ = (
    "ROOT_LOGGER_NAME",
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
)

ROOT_LOGGER_NAME: Final = "emysql"

SIMPLE_FORMAT: Final = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

correlation_id_var: ContextVar[str | None] = ContextVar("emysql_correlation_id", default=None)


def set_correlation_id(correlation_id: str | None) -> None:
    """Tag every statement log and event in the current context with ``correlation_id``.

    Pass ``None`` to clear it.
    """
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    return correlation_id_var.get()


class CorrelationIDFilter(logging.Filter):
    """Copies the context correlation ID onto records that do not carry one."""

    def filter(self, record: LogRecord) -> bool:
        if getattr(record, "correlation_id", None) is None:
            record.correlation_id = get_correlation_id()  # type: ignore[attr-defined]
        return True


class StructuredFormatter(logging.Formatter):
    """Renders each record as one line of JSON.

    Keys from ``extra_fields`` are merged into the top level, so a statement
    log can be filtered on ``full_query`` or ``driver`` without parsing the
    message.
    """

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id is not None:
            entry["correlation_id"] = correlation_id
        entry.update(getattr(record, "extra_fields", None) or {})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return encode_json(entry)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger in the ``emysql`` namespace.

    ``"statement"`` and ``"emysql.statement"`` name the same logger.
    """
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())
    return logger


def configure_logging(
    level: int | str = logging.INFO,
    structured: bool = True,
    stream: IO[str] | None = None,
    handlers: Iterable[logging.Handler] = (),
) -> logging.Logger:
    """Send emysql logs to ``stream`` and stop them reaching the root logger.

    Args:
        level: Level name or number for the ``emysql`` logger.
        structured: Emit JSON lines with :class:`StructuredFormatter` instead of plain text.
        stream: Destination of the console handler. Defaults to ``sys.stderr``.
        handlers: Further handlers, attached with their own formatters.

    Returns:
        The configured ``emysql`` logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.handlers.clear()

    console = logging.StreamHandler(stream)
    console.setFormatter(StructuredFormatter() if structured else logging.Formatter(SIMPLE_FORMAT))
    logger.addHandler(console)
    for handler in handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def log_with_context(logger: logging.Logger, level: int, message: str, **fields: Any) -> None:
    """Log ``message`` with ``fields`` attached as structured keys.

    The record keeps the caller's module and line number.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"extra_fields": fields}, stacklevel=2)
