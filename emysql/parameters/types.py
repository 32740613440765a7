"""Core parameter types used throughout emysql."""

from enum import Enum
from typing import Any, Final, Optional

__all__ = ("VALID_TYPE_TAGS", "Binding", "ParameterType", "PlaceholderInfo")


class ParameterType(str, Enum):
    """Bound parameter type tags, as understood by the MySQL prepared statement API."""

    INTEGER = "i"
    DOUBLE = "d"
    STRING = "s"
    BLOB = "b"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


VALID_TYPE_TAGS: Final = frozenset(t.value for t in ParameterType)


class Binding:
    """Immutable type-tagged parameter value."""

    __slots__ = ("type", "value")

    def __init__(self, type: ParameterType, value: Optional[Any]) -> None:  # noqa: A002
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __eq__(self, other: object) -> bool:
        """Equality comparison for Binding objects."""
        if not isinstance(other, type(self)):
            return False
        return self.type == other.type and self.value == other.value

    def __hash__(self) -> int:
        try:
            value_hash = hash(self.value)
        except TypeError:
            value_hash = hash(repr(self.value))
        return hash((self.type, value_hash))

    def __repr__(self) -> str:
        """String representation compatible with dataclass.__repr__."""
        return f"{type(self).__name__}(type={self.type!r}, value={self.value!r})"

    @property
    def is_null(self) -> bool:
        return self.value is None


class PlaceholderInfo:
    """Location of one positional placeholder in a SQL template."""

    __slots__ = ("ordinal", "placeholder_text", "position")

    def __init__(self, position: int, ordinal: int, placeholder_text: str = "?") -> None:
        self.position = position
        self.ordinal = ordinal
        self.placeholder_text = placeholder_text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.position == other.position and self.ordinal == other.ordinal

    def __hash__(self) -> int:
        return hash((self.position, self.ordinal))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(ordinal={self.ordinal!r}, "
            f"placeholder_text={self.placeholder_text!r}, position={self.position!r})"
        )

    @property
    def end(self) -> int:
        return self.position + len(self.placeholder_text)
