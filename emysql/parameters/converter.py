"""Placeholder style conversion for drivers that do not accept ``?``."""

from collections.abc import Sequence
from typing import Optional

from emysql.parameters.types import PlaceholderInfo
from emysql.parameters.validator import PlaceholderValidator

__all__ = ("PlaceholderConverter",)


class PlaceholderConverter:
    """Rewrites ``?`` templates into a driver's native placeholder style."""

    __slots__ = ("validator",)

    def __init__(self, validator: Optional[PlaceholderValidator] = None) -> None:
        self.validator = validator or PlaceholderValidator()

    def to_pyformat(self, sql: str, placeholders: Optional[Sequence[PlaceholderInfo]] = None) -> str:
        """Convert ``?`` placeholders to ``%s``.

        Every other ``%`` is doubled, since pyformat drivers apply ``%``
        formatting to the whole string when arguments are supplied.

        Args:
            sql: The SQL string with ``?`` placeholders
            placeholders: Optional placeholder info (extracted if not provided)

        Returns:
            SQL string with ``%s`` placeholders
        """
        placeholders = self.validator.extract_placeholders(sql) if placeholders is None else placeholders

        result_parts: list[str] = []
        current_pos = 0
        for placeholder in placeholders:
            result_parts.append(sql[current_pos : placeholder.position].replace("%", "%%"))
            result_parts.append("%s")
            current_pos = placeholder.end
        result_parts.append(sql[current_pos:].replace("%", "%%"))

        return "".join(result_parts)
