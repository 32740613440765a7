"""PyMySQL driver adapter."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final, Optional

from emysql.core.rendering import to_blob, to_integer, to_text
from emysql.driver import DriverAdapterBase
from emysql.exceptions import ArityMismatchError
from emysql.parameters.converter import PlaceholderConverter
from emysql.parameters.types import ParameterType
from emysql.utils.logging import get_logger

if TYPE_CHECKING:
    from pymysql.cursors import Cursor

    from emysql.adapters.pymysql._types import PyMysqlConnection
    from emysql.config import StatementConfig

__all__ = ("PyMysqlDriver", "PyMysqlNativeStatement", "pymysql_type_coercion_map")

logger = get_logger("adapters.pymysql")

_converter = PlaceholderConverter()


pymysql_type_coercion_map: Final[dict[ParameterType, Callable[[Any], Any]]] = {
    ParameterType.INTEGER: to_integer,
    ParameterType.DOUBLE: float,
    ParameterType.STRING: lambda v: v if isinstance(v, (str, bytes)) else to_text(v),
    ParameterType.BLOB: to_blob,
}


class PyMysqlNativeStatement:
    """Emulates a server-side prepared statement on a PyMySQL cursor.

    The ``?`` template is converted to PyMySQL's ``%s`` style once per
    prepare. Values are coerced per type tag and handed to
    ``Cursor.execute``, which escapes them client-side.
    """

    __slots__ = ("_args", "_cursor", "_pyformat_sql", "connection", "query")

    def __init__(self, connection: "PyMysqlConnection", query: str) -> None:
        self.connection = connection
        self._cursor: Optional[Cursor] = None
        self.query = query
        self._pyformat_sql = _converter.to_pyformat(query)
        self._args: Optional[tuple[Any, ...]] = None

    def prepare(self, query: str) -> None:
        self.close()
        self.query = query
        self._pyformat_sql = _converter.to_pyformat(query)
        self._args = None

    def bind_param(self, types: str, *values: Any) -> bool:
        """Replace the bound arguments, coercing each value per its tag."""
        if len(types) != len(values):
            raise ArityMismatchError(types, len(values), self.query)
        self._args = tuple(
            None if value is None else pymysql_type_coercion_map[ParameterType(tag)](value)
            for tag, value in zip(types, values)
        )
        return True

    def execute(self) -> bool:
        cursor = self._get_cursor()
        if self._args:
            cursor.execute(self._pyformat_sql, self._args)
        else:
            cursor.execute(self.query)
        return True

    @property
    def rowcount(self) -> int:
        return self._cursor.rowcount if self._cursor is not None else -1

    @property
    def lastrowid(self) -> Optional[int]:
        return self._cursor.lastrowid if self._cursor is not None else None

    @property
    def column_names(self) -> list[str]:
        if self._cursor is None or not self._cursor.description:
            return []
        return [column[0] for column in self._cursor.description]

    def fetchone(self) -> Optional[Any]:
        return self._get_cursor().fetchone()

    def fetchall(self) -> list[Any]:
        return list(self._get_cursor().fetchall())

    def close(self) -> None:
        if self._cursor is not None:
            self._cursor.close()
            self._cursor = None

    def _get_cursor(self) -> "Cursor":
        if self._cursor is None:
            self._cursor = self.connection.cursor()
        return self._cursor


class PyMysqlDriver(DriverAdapterBase["PyMysqlConnection"]):
    """Driver adapter over a PyMySQL connection."""

    __slots__ = ()

    dialect = "mysql"

    def __init__(self, connection: "PyMysqlConnection", statement_config: "Optional[StatementConfig]" = None) -> None:
        super().__init__(connection, statement_config)

    def escape(self, value: str) -> str:
        return self.connection.escape_string(value)

    def create_native_statement(self, query: str) -> PyMysqlNativeStatement:
        return PyMysqlNativeStatement(self.connection, query)

    def commit(self) -> None:
        self.connection.commit()

    def rollback(self) -> None:
        self.connection.rollback()

    def close(self) -> None:
        logger.debug("Closing PyMySQL connection")
        self.connection.close()
