"""Pretty-printing of interpolated queries for log output."""

from sqlglot import parse_one
from sqlglot.errors import SqlglotError

from emysql.exceptions import SQLConversionError

__all__ = ("format_sql",)


def format_sql(sql: str, dialect: str = "mysql", pretty: bool = True) -> str:
    """Re-render ``sql`` through sqlglot.

    Args:
        sql: The SQL query string to format.
        dialect: The sqlglot dialect to parse and render with.
        pretty: Emit indented, multi-line SQL.

    Raises:
        SQLConversionError: If sqlglot cannot parse the query.

    Returns:
        The formatted SQL query string.
    """
    try:
        return parse_one(sql, dialect=dialect).sql(dialect=dialect, pretty=pretty)
    except SqlglotError as e:
        msg = f"Failed to format SQL: {e!s}"
        raise SQLConversionError(msg) from e
