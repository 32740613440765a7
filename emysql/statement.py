"""Prepared statement that records an interpolated copy of every query it runs."""

import logging
from time import perf_counter, time
from typing import TYPE_CHECKING, Any, Optional

from emysql.config import StatementConfig, default_statement_config
from emysql.core.interpolator import QueryInterpolator
from emysql.core.rendering import ValueRenderer
from emysql.observability import create_event
from emysql.parameters.store import ParameterStore
from emysql.parameters.validator import PlaceholderValidator
from emysql.utils.formatting import format_sql
from emysql.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from types import TracebackType

    from emysql.parameters.types import Binding
    from emysql.protocols import EscapeService, NativeStatement

__all__ = ("PreparedStatement",)

logger = get_logger("statement")

_validator = PlaceholderValidator()


class PreparedStatement:
    """A prepared statement that keeps a human-readable copy of its query.

    The statement owns its template and bound parameters. Escaping and the real
    parameterized round trip are delegated to the injected ``escaper`` and
    ``native`` collaborators.

    Example:
        stmt = connection.prepare("SELECT * FROM contacts WHERE id = ? OR first_name = ?")
        stmt.bind_param("is", 1, "Noah")
        stmt.execute()
        stmt.full_query  # "SELECT * FROM contacts WHERE id = 1 OR first_name = 'Noah'"
    """

    __slots__ = ("_interpolator", "_parameters", "config", "escaper", "full_query", "native", "query_string")

    def __init__(
        self,
        query: str,
        native: "NativeStatement",
        escaper: "Optional[EscapeService]" = None,
        config: Optional[StatementConfig] = None,
    ) -> None:
        self.query_string = query
        self.native = native
        self.escaper = escaper
        self.config = config or default_statement_config
        self.full_query: Optional[str] = None
        self._parameters = ParameterStore()
        self._interpolator = QueryInterpolator(
            renderer=ValueRenderer(escaper, warn_on_fallback=self.config.warn_on_fallback_escape),
            validator=_validator,
            strict=self.config.strict_placeholders,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(query_string={self.query_string!r}, parameters={len(self._parameters)})"

    def __enter__(self) -> "PreparedStatement":
        return self

    def __exit__(
        self,
        exc_type: "Optional[type[BaseException]]",
        exc_val: Optional[BaseException],
        exc_tb: "Optional[TracebackType]",
    ) -> None:
        self.close()

    @property
    def bound_parameters(self) -> "list[Binding]":
        return self._parameters.to_ordered_list()

    @property
    def param_count(self) -> int:
        """Number of placeholders outside quoted literals in the template."""
        return _validator.count_placeholders(self.query_string)

    def prepare(self, query: str) -> None:
        """Re-prepare the statement with a new template.

        Bound parameters and the last interpolated query are discarded.
        """
        self.native.prepare(query)
        self.query_string = query
        self.full_query = None
        self._parameters.clear()

    def bind_param(self, types: str, *values: Any) -> bool:
        """Bind values to the statement's placeholders.

        Bindings accumulate, so values may be bound all at once or across
        several calls. Values are only sent to the driver on :meth:`execute`.

        Args:
            types: One type tag per value: ``i`` integer, ``d`` double, ``s`` string, ``b`` blob.
            *values: The values, in placeholder order.

        Raises:
            ArityMismatchError: ``types`` and ``values`` differ in length.
            UnknownParameterTypeError: ``types`` contains an unknown tag.

        Returns:
            True
        """
        self._parameters.bind(types, values)
        return True

    def interpolate_query(self) -> str:
        """Substitute bound values into the template.

        The result is also stored on :attr:`full_query`. :attr:`query_string`
        is never modified.

        Returns:
            The interpolated query.
        """
        self.full_query = self._interpolator.interpolate(self.query_string, self._parameters.to_ordered_list())
        log_with_context(logger, logging.DEBUG, "Interpolated query", full_query=self.full_query)
        return self.full_query

    def format_query(self, pretty: bool = True) -> str:
        """Return the interpolated query re-rendered by sqlglot for log output."""
        return format_sql(self.interpolate_query(), dialect=self.config.dialect, pretty=pretty)

    def execute(self) -> bool:
        """Interpolate the query, bind the parameters natively and execute.

        Driver errors propagate unchanged. :attr:`full_query` is set before the
        driver is called, so it is available when execution fails.

        Returns:
            The native statement's execute result.
        """
        full_query = self.interpolate_query()
        types, values = self._parameters.build_arguments()
        if self.config.print_sql:
            log_with_context(
                logger,
                logging.INFO,
                f"Executing: {full_query}",
                full_query=full_query,
                type_string=types,
                driver=type(self.native).__name__,
            )

        started_at = time()
        start = perf_counter()
        try:
            if types:
                self.native.bind_param(types, *values)
            result = self.native.execute()
        except Exception as e:
            logger.debug("Execution failed for query: %s", full_query, exc_info=True)
            self._notify(types, values, started_at, perf_counter() - start, succeeded=False, error=str(e))
            raise
        self._notify(types, values, started_at, perf_counter() - start, succeeded=bool(result))
        return result

    def fetchone(self) -> Optional[Any]:
        return self.native.fetchone()

    def fetchall(self) -> "list[Any]":
        return self.native.fetchall()

    def close(self) -> None:
        self.native.close()

    def _notify(
        self,
        types: str,
        values: "list[Any]",
        started_at: float,
        duration_s: float,
        succeeded: bool,
        error: Optional[str] = None,
    ) -> None:
        if not self.config.statement_observers:
            return
        event = create_event(
            sql=self.query_string,
            full_query=self.full_query or self.query_string,
            type_string=types,
            parameters=values,
            driver=type(self.native).__name__,
            succeeded=succeeded,
            duration_s=duration_s,
            error=error,
            started_at=started_at,
        )
        for observer in self.config.statement_observers:
            try:
                observer(event)
            except Exception:
                logger.exception("Statement observer %r failed", observer)
