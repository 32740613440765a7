"""Unit tests for the PyMySQL driver adapter."""

from typing import Any
from unittest.mock import Mock

import pytest

from emysql import PreparedStatement, StatementConfig
from emysql.adapters.pymysql import PyMysqlDriver, PyMysqlNativeStatement
from emysql.exceptions import ArityMismatchError, ParameterError
from emysql.protocols import EscapeService, NativeStatement


@pytest.fixture
def mock_cursor() -> Mock:
    cursor = Mock()
    cursor.execute.return_value = 1
    cursor.fetchall.return_value = ((3, "Some String"),)
    cursor.fetchone.return_value = (3, "Some String")
    cursor.description = (("three",), ("some_string",))
    cursor.rowcount = 1
    cursor.lastrowid = 42
    return cursor


@pytest.fixture
def mock_pymysql_connection(mock_cursor: Mock) -> Mock:
    connection = Mock()
    connection.cursor = Mock(return_value=mock_cursor)
    connection.escape_string = Mock(side_effect=lambda value: value.replace("'", "\\'").replace("\n", "\\n"))
    return connection


@pytest.fixture
def pymysql_driver(mock_pymysql_connection: Mock) -> PyMysqlDriver:
    return PyMysqlDriver(connection=mock_pymysql_connection)


def test_pymysql_driver_initialization(mock_pymysql_connection: Mock) -> None:
    config = StatementConfig()
    driver = PyMysqlDriver(connection=mock_pymysql_connection, statement_config=config)

    assert driver.connection is mock_pymysql_connection
    assert driver.statement_config is config
    assert driver.dialect == "mysql"
    assert isinstance(driver, EscapeService)


def test_prepare_returns_prepared_statement(pymysql_driver: PyMysqlDriver) -> None:
    statement = pymysql_driver.prepare("SELECT 2")

    assert isinstance(statement, PreparedStatement)
    assert isinstance(statement.native, PyMysqlNativeStatement)
    assert isinstance(statement.native, NativeStatement)
    assert statement.escaper is pymysql_driver


def test_escape_uses_connection(pymysql_driver: PyMysqlDriver, mock_pymysql_connection: Mock) -> None:
    assert pymysql_driver.escape("O'Brien") == "O\\'Brien"
    mock_pymysql_connection.escape_string.assert_called_once_with("O'Brien")


def test_execute_sends_pyformat_query_and_coerced_args(
    pymysql_driver: PyMysqlDriver, mock_cursor: Mock
) -> None:
    statement = pymysql_driver.prepare("SELECT ? + ? + ?, ?, '50%'")
    statement.bind_param("iiis", "1", 1, True, "Some String")

    assert statement.execute() is True

    mock_cursor.execute.assert_called_once_with("SELECT %s + %s + %s, %s, '50%%'", (1, 1, 1, "Some String"))
    assert statement.full_query == "SELECT 1 + 1 + 1, 'Some String', '50%'"


def test_execute_without_parameters_sends_query_unchanged(pymysql_driver: PyMysqlDriver, mock_cursor: Mock) -> None:
    statement = pymysql_driver.prepare("SELECT '100%'")

    statement.execute()

    mock_cursor.execute.assert_called_once_with("SELECT '100%'")


def test_values_coerced_per_type_tag(mock_pymysql_connection: Mock, mock_cursor: Mock) -> None:
    native = PyMysqlNativeStatement(mock_pymysql_connection, "INSERT INTO t VALUES (?, ?, ?, ?, ?)")

    native.bind_param("idsbs", 7, "2.5", 10, "blob", None)
    native.execute()

    mock_cursor.execute.assert_called_once_with(
        "INSERT INTO t VALUES (%s, %s, %s, %s, %s)", (7, 2.5, "10", b"blob", None)
    )


@pytest.mark.parametrize(
    ("value", "shown", "sent"),
    [(5, "'5'", b"5"), (1.5, "'1.5'", b"1.5"), (bytearray(b"raw"), "'raw'", b"raw")],
)
def test_blob_sends_bytes_of_interpolated_text(
    pymysql_driver: PyMysqlDriver, mock_cursor: Mock, value: Any, shown: str, sent: bytes
) -> None:
    statement = pymysql_driver.prepare("INSERT INTO f SET data = ?")
    statement.bind_param("b", value)

    statement.execute()

    assert statement.full_query == f"INSERT INTO f SET data = {shown}"
    mock_cursor.execute.assert_called_once_with("INSERT INTO f SET data = %s", (sent,))


def test_integer_sends_truncated_value_shown_in_query(pymysql_driver: PyMysqlDriver, mock_cursor: Mock) -> None:
    statement = pymysql_driver.prepare("SELECT ?, ?")
    statement.bind_param("ii", "2.5", 3.9)

    statement.execute()

    assert statement.full_query == "SELECT 2, 3"
    mock_cursor.execute.assert_called_once_with("SELECT %s, %s", (2, 3))


def test_integer_without_numeric_form_is_rejected(mock_pymysql_connection: Mock) -> None:
    native = PyMysqlNativeStatement(mock_pymysql_connection, "SELECT ?")

    with pytest.raises(ParameterError, match="integer literal"):
        native.bind_param("i", "abc")


def test_native_bind_param_replaces_previous_args(mock_pymysql_connection: Mock, mock_cursor: Mock) -> None:
    native = PyMysqlNativeStatement(mock_pymysql_connection, "SELECT ?")

    native.bind_param("i", 1)
    native.bind_param("i", 2)
    native.execute()

    mock_cursor.execute.assert_called_once_with("SELECT %s", (2,))


def test_native_bind_param_arity_mismatch(mock_pymysql_connection: Mock) -> None:
    native = PyMysqlNativeStatement(mock_pymysql_connection, "SELECT ?")

    with pytest.raises(ArityMismatchError):
        native.bind_param("ii", 1)


def test_driver_errors_propagate_unchanged(pymysql_driver: PyMysqlDriver, mock_cursor: Mock) -> None:
    error = Exception(1064, "You have an error in your SQL syntax")
    mock_cursor.execute.side_effect = error
    statement = pymysql_driver.prepare("SELEC ?")
    statement.bind_param("s", "x")

    with pytest.raises(Exception) as exc_info:
        statement.execute()

    assert exc_info.value is error
    assert statement.full_query == "SELEC 'x'"


def test_fetch_results(pymysql_driver: PyMysqlDriver, mock_cursor: Mock) -> None:
    statement = pymysql_driver.prepare("SELECT ? + ? + ?, ?")
    statement.bind_param("iiis", 1, 1, 1, "Some String")
    statement.execute()

    assert statement.fetchall() == [(3, "Some String")]
    assert statement.fetchone() == (3, "Some String")
    assert statement.native.column_names == ["three", "some_string"]
    assert statement.native.rowcount == 1
    assert statement.native.lastrowid == 42


def test_cursor_is_created_lazily_and_closed(mock_pymysql_connection: Mock, mock_cursor: Mock) -> None:
    native = PyMysqlNativeStatement(mock_pymysql_connection, "SELECT 1")

    assert native.rowcount == -1
    assert native.lastrowid is None
    assert native.column_names == []
    mock_pymysql_connection.cursor.assert_not_called()

    native.execute()
    native.close()
    native.close()

    mock_cursor.close.assert_called_once_with()


def test_prepare_on_native_statement_resets(mock_pymysql_connection: Mock, mock_cursor: Mock) -> None:
    native = PyMysqlNativeStatement(mock_pymysql_connection, "SELECT ?")
    native.bind_param("i", 1)
    native.execute()

    native.prepare("SELECT 2")
    native.execute()

    mock_cursor.close.assert_called_once_with()
    assert mock_cursor.execute.call_args_list[-1].args == ("SELECT 2",)


def test_connection_level_execute(pymysql_driver: PyMysqlDriver, mock_cursor: Mock) -> None:
    statement = pymysql_driver.execute("SELECT * FROM contacts WHERE contacts_id IN (?, ?)", "ii", 1, 2)

    assert statement.full_query == "SELECT * FROM contacts WHERE contacts_id IN (1, 2)"
    mock_cursor.execute.assert_called_once_with("SELECT * FROM contacts WHERE contacts_id IN (%s, %s)", (1, 2))


def test_driver_transaction_helpers(pymysql_driver: PyMysqlDriver, mock_pymysql_connection: Mock) -> None:
    pymysql_driver.commit()
    pymysql_driver.rollback()
    with pymysql_driver:
        pass

    mock_pymysql_connection.commit.assert_called_once_with()
    mock_pymysql_connection.rollback.assert_called_once_with()
    mock_pymysql_connection.close.assert_called_once_with()
