"""Statement configuration."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from emysql.observability import StatementEvent

__all__ = ("StatementConfig", "StatementObserver", "default_statement_config")

StatementObserver = Callable[["StatementEvent"], None]


@dataclass(slots=True)
class StatementConfig:
    """Controls how prepared statements interpolate and report queries."""

    strict_placeholders: bool = False
    """Raise when placeholder and binding counts differ instead of tolerating it."""

    warn_on_fallback_escape: bool = True
    """Log a warning when values are escaped without a live connection."""

    dialect: str = "mysql"
    """sqlglot dialect used by ``PreparedStatement.format_query``."""

    print_sql: bool = False
    """Log the interpolated query at INFO on every execute."""

    statement_observers: tuple[StatementObserver, ...] = field(default_factory=tuple)
    """Callbacks receiving a ``StatementEvent`` after each execute."""

    def replace(self, **changes: Any) -> "StatementConfig":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


default_statement_config = StatementConfig()
