"""Runtime-checkable protocols for the collaborators a statement depends on."""

from typing import Any, Optional, Protocol, runtime_checkable

__all__ = ("EscapeService", "NativeStatement")


@runtime_checkable
class EscapeService(Protocol):
    """Escapes raw text for embedding in a SQL string literal."""

    def escape(self, value: str) -> str:
        """Return ``value`` escaped per the server's literal rules, without surrounding quotes."""
        ...


@runtime_checkable
class NativeStatement(Protocol):
    """Driver-side prepared statement that performs the real round trip."""

    def prepare(self, query: str) -> None:
        """Prepare (or re-prepare) the statement for ``query``."""
        ...

    def bind_param(self, types: str, *values: Any) -> bool:
        """Bind one value per type tag, in placeholder order."""
        ...

    def execute(self) -> bool:
        """Execute the statement with the bound values."""
        ...

    def fetchone(self) -> Optional[Any]:
        """Fetch the next row of the result set."""
        ...

    def fetchall(self) -> list[Any]:
        """Fetch all remaining rows of the result set."""
        ...

    def close(self) -> None:
        """Release driver resources held by the statement."""
        ...
