"""Prepared statements that keep a readable, fully interpolated copy of their query."""

from emysql import adapters, core, exceptions, parameters, utils
from emysql.config import StatementConfig, default_statement_config
from emysql.driver import DriverAdapterBase
from emysql.exceptions import ArityMismatchError, EMysqlError, ParameterError, UnknownParameterTypeError
from emysql.observability import StatementEvent, default_statement_observer
from emysql.parameters import Binding, ParameterStore, ParameterType
from emysql.protocols import EscapeService, NativeStatement
from emysql.statement import PreparedStatement

__all__ = (
    "ArityMismatchError",
    "Binding",
    "DriverAdapterBase",
    "EMysqlError",
    "EscapeService",
    "NativeStatement",
    "ParameterError",
    "ParameterStore",
    "ParameterType",
    "PreparedStatement",
    "StatementConfig",
    "StatementEvent",
    "UnknownParameterTypeError",
    "adapters",
    "core",
    "default_statement_config",
    "default_statement_observer",
    "exceptions",
    "parameters",
    "utils",
)
