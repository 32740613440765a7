from typing import TYPE_CHECKING

from pymysql.connections import Connection

if TYPE_CHECKING:
    from typing_extensions import TypeAlias

    PyMysqlConnection: TypeAlias = Connection
else:
    PyMysqlConnection = Connection

__all__ = ("PyMysqlConnection",)
