"""Ordered storage for parameters bound to a prepared statement."""

from collections.abc import Iterator, Sequence
from typing import Any

from emysql.exceptions import ArityMismatchError, UnknownParameterTypeError
from emysql.parameters.types import VALID_TYPE_TAGS, Binding, ParameterType

__all__ = ("ParameterStore",)


class ParameterStore:
    """Accumulates type-tagged bindings in placeholder order.

    Bindings accumulate across calls to :meth:`bind`, so both
    ``bind("ss", ["Noah", "Heck"])`` and two single-value calls produce the
    same store.
    """

    __slots__ = ("_bindings",)

    def __init__(self) -> None:
        self._bindings: list[Binding] = []

    def bind(self, types: str, values: Sequence[Any]) -> None:
        """Append one binding per type tag.

        The whole call is validated before anything is appended.

        Args:
            types: One character per value (``i``, ``d``, ``s`` or ``b``).
            values: Values to bind, in placeholder order.

        Raises:
            ArityMismatchError: ``types`` and ``values`` differ in length.
            UnknownParameterTypeError: ``types`` contains an unknown tag.
        """
        if len(types) != len(values):
            raise ArityMismatchError(types, len(values))
        unknown = sorted({tag for tag in types if tag not in VALID_TYPE_TAGS})
        if unknown:
            msg = f"Unknown parameter type tag(s) {', '.join(map(repr, unknown))} in {types!r}"
            raise UnknownParameterTypeError(msg)

        self._bindings.extend(Binding(ParameterType(tag), value) for tag, value in zip(types, values))

    def clear(self) -> None:
        self._bindings.clear()

    def to_ordered_list(self) -> list[Binding]:
        """Return a snapshot of the current bindings."""
        return list(self._bindings)

    @property
    def type_string(self) -> str:
        return "".join(binding.type.value for binding in self._bindings)

    def build_arguments(self) -> tuple[str, list[Any]]:
        """Return bindings in the shape a native ``bind_param`` expects.

        Returns:
            The concatenated type tags and one value per tag, in order.
        """
        return self.type_string, [binding.value for binding in self._bindings]

    def __len__(self) -> int:
        return len(self._bindings)

    def __bool__(self) -> bool:
        return bool(self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(list(self._bindings))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bindings={self._bindings!r})"
