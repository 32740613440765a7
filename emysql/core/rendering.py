"""Literal rendering of bound values for the interpolated query.

Rendered values are for display only. The typed values handed to the driver
are what actually reach the server.
"""

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, Final, Optional

from emysql.exceptions import ParameterError
from emysql.parameters.types import Binding, ParameterType
from emysql.utils.logging import get_logger

if TYPE_CHECKING:
    from emysql.protocols import EscapeService

__all__ = ("NULL_LITERAL", "ValueRenderer", "fallback_escape", "to_blob", "to_integer", "to_text")

logger = get_logger("core.rendering")

NULL_LITERAL: Final = "NULL"

_FALLBACK_ESCAPES: Final = str.maketrans({"\\": "\\\\", "'": "\\'", '"': '\\"', "\x00": "\\0"})


def fallback_escape(value: str) -> str:
    """Backslash-escape quotes, backslashes and NUL bytes.

    This does not know the connection character set and is not safe for
    untrusted input. It exists only so a statement without a live connection
    can still produce a readable query for debugging.
    """
    return value.translate(_FALLBACK_ESCAPES)


def to_text(value: Any) -> str:
    """Return the locale-independent textual form of ``value``."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="backslashreplace")
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def to_integer(value: Any) -> int:
    """Coerce a value bound under the ``i`` tag, truncating toward zero.

    Raises:
        ParameterError: The value has no integer form.
    """
    if isinstance(value, (bool, int)):
        return int(value)
    try:
        if isinstance(value, (float, Decimal)):
            return int(value)
        return int(Decimal(to_text(value).strip()))
    except (InvalidOperation, OverflowError, ValueError) as e:
        msg = f"Cannot render {value!r} as an integer literal"
        raise ParameterError(msg) from e


def to_blob(value: Any) -> bytes:
    """Coerce a value bound under the ``b`` tag to the bytes of its textual form."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return to_text(value).encode("utf-8")


class ValueRenderer:
    """Renders bindings as SQL literals through an escape service.

    Without an escape service values are escaped with :func:`fallback_escape`
    and a warning is logged the first time that happens.
    """

    __slots__ = ("_fallback_warned", "escaper", "warn_on_fallback")

    def __init__(self, escaper: "Optional[EscapeService]" = None, warn_on_fallback: bool = True) -> None:
        self.escaper = escaper
        self.warn_on_fallback = warn_on_fallback
        self._fallback_warned = False

    def escape(self, text: str) -> str:
        if self.escaper is not None:
            return self.escaper.escape(text)
        if self.warn_on_fallback and not self._fallback_warned:
            logger.warning(
                "No escape service available; interpolated query uses generic backslash escaping "
                "and must only be used for debugging"
            )
            self._fallback_warned = True
        return fallback_escape(text)

    def render(self, binding: Binding) -> str:
        """Render one binding as a SQL literal.

        ``None`` renders as ``NULL`` whatever the tag. Integers are unquoted and
        unescaped. Everything else is escaped and wrapped in single quotes.
        """
        if binding.value is None:
            return NULL_LITERAL
        if binding.type is ParameterType.INTEGER:
            return str(to_integer(binding.value))
        return f"'{self.escape(to_text(binding.value))}'"
