"""Parameter binding infrastructure for emysql."""

from emysql.parameters.converter import PlaceholderConverter
from emysql.parameters.store import ParameterStore
from emysql.parameters.types import VALID_TYPE_TAGS, Binding, ParameterType, PlaceholderInfo
from emysql.parameters.validator import PlaceholderValidator

__all__ = (
    "VALID_TYPE_TAGS",
    "Binding",
    "ParameterStore",
    "ParameterType",
    "PlaceholderConverter",
    "PlaceholderInfo",
    "PlaceholderValidator",
)
