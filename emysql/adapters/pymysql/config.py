"""PyMySQL database configuration."""

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, ClassVar, Optional, TypedDict

import pymysql
from typing_extensions import NotRequired

from emysql.adapters.pymysql._types import PyMysqlConnection
from emysql.adapters.pymysql.driver import PyMysqlDriver
from emysql.config import default_statement_config
from emysql.exceptions import ImproperConfigurationError
from emysql.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Generator

    from emysql.config import StatementConfig

__all__ = ("PyMysqlConfig", "PyMysqlConnectionParams")

logger = get_logger("adapters.pymysql")


class PyMysqlConnectionParams(TypedDict, total=False):
    """PyMySQL connection parameters, as accepted by ``pymysql.connect()``."""

    host: NotRequired[str]
    """Host where the database server is located."""

    user: NotRequired[str]
    """The username used to authenticate with the database."""

    password: NotRequired[str]
    """The password used to authenticate with the database."""

    database: NotRequired[str]
    """The database name to use."""

    port: NotRequired[int]
    """The TCP/IP port of the MySQL server."""

    unix_socket: NotRequired[str]
    """The location of the Unix socket file."""

    charset: NotRequired[str]
    """The character set to use for the connection."""

    connect_timeout: NotRequired[float]
    read_timeout: NotRequired[float]
    write_timeout: NotRequired[float]

    autocommit: NotRequired[bool]
    """If True, autocommit mode will be enabled."""

    init_command: NotRequired[str]
    """Initial SQL statement to execute once connected."""

    sql_mode: NotRequired[str]
    ssl: NotRequired[Any]
    cursorclass: NotRequired[type]


class PyMysqlConfig:
    """Configuration for PyMySQL connections."""

    driver_type: ClassVar[type[PyMysqlDriver]] = PyMysqlDriver
    connection_type: ClassVar[type[PyMysqlConnection]] = PyMysqlConnection

    def __init__(
        self,
        *,
        connection_config: "Optional[PyMysqlConnectionParams | dict[str, Any]]" = None,
        statement_config: "Optional[StatementConfig]" = None,
    ) -> None:
        """Initialize PyMySQL configuration.

        Args:
            connection_config: Parameters passed to ``pymysql.connect()``
            statement_config: Default statement configuration for prepared statements
        """
        self.connection_config: dict[str, Any] = dict(connection_config or {})
        self.statement_config = statement_config or default_statement_config

        if "db" in self.connection_config:
            msg = "Use 'database' instead of the deprecated 'db' connection parameter"
            raise ImproperConfigurationError(msg)

    @property
    def connection_config_dict(self) -> dict[str, Any]:
        return {k: v for k, v in self.connection_config.items() if v is not None}

    def create_connection(self) -> PyMysqlConnection:
        """Open a new PyMySQL connection.

        Returns:
            A PyMySQL connection instance.
        """
        config = self.connection_config_dict
        logger.debug("Opening PyMySQL connection to %s:%s", config.get("host", "localhost"), config.get("port", 3306))
        return pymysql.connect(**config)

    @contextmanager
    def provide_connection(self, *args: Any, **kwargs: Any) -> "Generator[PyMysqlConnection, None, None]":
        """Provide a raw PyMySQL connection, closed on exit."""
        connection = self.create_connection()
        try:
            yield connection
        finally:
            connection.close()

    @contextmanager
    def provide_session(
        self, *args: Any, statement_config: "Optional[StatementConfig]" = None, **kwargs: Any
    ) -> "Generator[PyMysqlDriver, None, None]":
        """Provide a driver whose ``prepare`` returns interpolating statements.

        Yields:
            PyMysqlDriver: A driver over a fresh connection
        """
        with self.provide_connection(*args, **kwargs) as connection:
            yield self.driver_type(connection, statement_config=statement_config or self.statement_config)
