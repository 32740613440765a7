from emysql.adapters.pymysql._types import PyMysqlConnection
from emysql.adapters.pymysql.config import PyMysqlConfig, PyMysqlConnectionParams
from emysql.adapters.pymysql.driver import PyMysqlDriver, PyMysqlNativeStatement, pymysql_type_coercion_map

__all__ = (
    "PyMysqlConfig",
    "PyMysqlConnection",
    "PyMysqlConnectionParams",
    "PyMysqlDriver",
    "PyMysqlNativeStatement",
    "pymysql_type_coercion_map",
)
