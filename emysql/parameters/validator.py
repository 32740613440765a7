"""Placeholder extraction for positional ``?`` templates.

Quoted literals are matched first and skipped so a ``?`` inside a string
constant is never treated as a placeholder.
"""

import re
from collections import OrderedDict
from typing import Final

from emysql.parameters.types import PlaceholderInfo

__all__ = ("PLACEHOLDER_CACHE_MAX_SIZE", "PlaceholderValidator")

PLACEHOLDER_CACHE_MAX_SIZE: Final[int] = 1024


_PLACEHOLDER_REGEX: Final = re.compile(
    r"""
    (?P<dquote>"(?:[^"\\]|\\.)*") |                             # Double-quoted strings
    (?P<squote>'(?:[^'\\]|\\.)*') |                             # Single-quoted strings
    (?P<open_literal>["'][\s\S]*) |                             # Unterminated literal, runs to end of input
    (?P<qmark>\?)
    """,
    re.VERBOSE | re.DOTALL,
)


class PlaceholderValidator:
    """Extracts positional placeholders from SQL templates.

    Results are kept in an LRU cache of at most ``max_size`` templates.
    """

    __slots__ = ("_cache", "_max_size")

    def __init__(self, max_size: int = PLACEHOLDER_CACHE_MAX_SIZE) -> None:
        self._cache: OrderedDict[str, tuple[PlaceholderInfo, ...]] = OrderedDict()
        self._max_size = max_size

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def extract_placeholders(self, sql: str) -> tuple[PlaceholderInfo, ...]:
        """Extract placeholder information from a SQL string.

        Args:
            sql: SQL template to analyze

        Returns:
            PlaceholderInfo objects, sorted by position
        """
        cached = self._cache.get(sql)
        if cached is not None:
            self._cache.move_to_end(sql)
            return cached

        placeholders: list[PlaceholderInfo] = []
        for match in _PLACEHOLDER_REGEX.finditer(sql):
            if match.group("qmark") is None:
                continue
            placeholders.append(PlaceholderInfo(position=match.start("qmark"), ordinal=len(placeholders)))

        result = tuple(placeholders)
        if len(self._cache) >= self._max_size:
            self._cache.popitem(last=False)
        self._cache[sql] = result
        return result

    def count_placeholders(self, sql: str) -> int:
        return len(self.extract_placeholders(sql))

    def has_placeholders(self, sql: str) -> bool:
        """Quick check if SQL contains any placeholders."""
        return bool(self.extract_placeholders(sql))
