"""Driver adapter base whose ``prepare`` returns interpolating statements."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

from emysql.config import StatementConfig, default_statement_config
from emysql.statement import PreparedStatement

if TYPE_CHECKING:
    from types import TracebackType

    from emysql.protocols import NativeStatement

__all__ = ("ConnectionT", "DriverAdapterBase")

ConnectionT = TypeVar("ConnectionT")


class DriverAdapterBase(ABC, Generic[ConnectionT]):
    """Wraps a live driver connection.

    The wrapper is the escape service for every statement it prepares, so
    interpolated values are escaped with the connection's own character set
    rules.
    """

    __slots__ = ("connection", "statement_config")

    def __init__(self, connection: ConnectionT, statement_config: Optional[StatementConfig] = None) -> None:
        self.connection = connection
        self.statement_config = statement_config or default_statement_config

    def __enter__(self) -> "DriverAdapterBase[ConnectionT]":
        return self

    def __exit__(
        self,
        exc_type: "Optional[type[BaseException]]",
        exc_val: Optional[BaseException],
        exc_tb: "Optional[TracebackType]",
    ) -> None:
        self.close()

    @abstractmethod
    def escape(self, value: str) -> str:
        """Escape ``value`` for use inside a quoted SQL literal."""

    @abstractmethod
    def create_native_statement(self, query: str) -> "NativeStatement":
        """Create the driver statement that performs the real execution."""

    @abstractmethod
    def close(self) -> None: ...

    def prepare(self, query: str, statement_config: Optional[StatementConfig] = None) -> PreparedStatement:
        """Prepare ``query`` and return a statement bound to this connection.

        Args:
            query: SQL with positional ``?`` placeholders.
            statement_config: Overrides the connection's statement configuration.

        Returns:
            A new prepared statement.
        """
        return PreparedStatement(
            query,
            native=self.create_native_statement(query),
            escaper=self,
            config=statement_config or self.statement_config,
        )

    def execute(self, query: str, types: str = "", *values: Any) -> PreparedStatement:
        """Prepare, bind and execute ``query`` in one call.

        Returns:
            The executed statement, for fetching results and reading ``full_query``.
        """
        statement = self.prepare(query)
        statement.bind_param(types, *values)
        statement.execute()
        return statement
