from typing import Any, Optional

__all__ = (
    "ArityMismatchError",
    "EMysqlError",
    "ExtraParameterError",
    "ImproperConfigurationError",
    "MissingDependencyError",
    "MissingParameterError",
    "ParameterError",
    "SQLConversionError",
    "UnknownParameterTypeError",
)


class EMysqlError(Exception):
    """Base exception class from which all emysql exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``EMysqlError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class MissingDependencyError(EMysqlError, ImportError):
    """Missing optional dependency.

    This exception is raised only when a module depends on a dependency that has not been installed.
    """

    def __init__(self, package: str, install_package: Optional[str] = None) -> None:
        super().__init__(
            f"Package {package!r} is not installed but required. You can install it by running "
            f"'pip install emysql[{install_package or package}]' to install emysql with the required extra "
            f"or 'pip install {install_package or package}' to install the package separately",
        )


class ImproperConfigurationError(EMysqlError):
    """Improper Configuration error."""


class SQLConversionError(EMysqlError):
    """Issues converting SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues converting SQL statement."
        super().__init__(message)


# -- SQL Parameter Errors --
class ParameterError(EMysqlError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class ArityMismatchError(ParameterError):
    """Raised when a bind call supplies a different number of values than type tags."""

    def __init__(self, types: str, value_count: int, sql: Optional[str] = None) -> None:
        super().__init__(
            f"Number of elements in type definition string ({len(types)}) doesn't match "
            f"number of bind variables ({value_count})",
            sql,
        )
        self.types = types
        self.value_count = value_count


class UnknownParameterTypeError(ParameterError):
    """Raised when a bind call uses a type tag other than ``i``, ``d``, ``s`` or ``b``."""


class MissingParameterError(ParameterError):
    """Raised when a template has more placeholders than bound parameters."""


class ExtraParameterError(ParameterError):
    """Raised when more parameters are bound than the template has placeholders."""
