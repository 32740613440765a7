from emysql.core.interpolator import QueryInterpolator
from emysql.core.rendering import NULL_LITERAL, ValueRenderer, fallback_escape, to_blob, to_integer, to_text

__all__ = ("NULL_LITERAL", "QueryInterpolator", "ValueRenderer", "fallback_escape", "to_blob", "to_integer", "to_text")
