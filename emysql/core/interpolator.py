"""Builds the display form of a prepared statement.

Placeholders are spliced by index over the original template, so rendered
values are never rescanned. A value containing ``?``, ``$``, ``\\`` or ``%``
appears in the output exactly as rendered.
"""

from collections.abc import Sequence
from typing import Optional

from emysql.core.rendering import ValueRenderer
from emysql.exceptions import ExtraParameterError, MissingParameterError
from emysql.parameters.types import Binding, PlaceholderInfo
from emysql.parameters.validator import PlaceholderValidator

__all__ = ("QueryInterpolator",)


class QueryInterpolator:
    """Substitutes rendered bindings into positional placeholders."""

    __slots__ = ("renderer", "strict", "validator")

    def __init__(
        self,
        renderer: Optional[ValueRenderer] = None,
        validator: Optional[PlaceholderValidator] = None,
        strict: bool = False,
    ) -> None:
        self.renderer = renderer or ValueRenderer()
        self.validator = validator or PlaceholderValidator()
        self.strict = strict

    def interpolate(self, template: str, bindings: Sequence[Binding]) -> str:
        """Return ``template`` with placeholders replaced by rendered bindings.

        Placeholder ``n`` receives binding ``n``. Surplus bindings are ignored
        and surplus placeholders are left as ``?`` unless ``strict`` is set.

        Args:
            template: SQL with positional ``?`` placeholders.
            bindings: Ordered bindings.

        Raises:
            MissingParameterError: strict mode, fewer bindings than placeholders.
            ExtraParameterError: strict mode, more bindings than placeholders.

        Returns:
            The interpolated query.
        """
        if not bindings:
            if self.strict:
                self._check_counts(template, self.validator.extract_placeholders(template), bindings)
            return template

        placeholders = self.validator.extract_placeholders(template)
        if self.strict:
            self._check_counts(template, placeholders, bindings)

        result_parts: list[str] = []
        current_pos = 0
        for placeholder, binding in zip(placeholders, bindings):
            result_parts.append(template[current_pos : placeholder.position])
            result_parts.append(self.renderer.render(binding))
            current_pos = placeholder.end
        result_parts.append(template[current_pos:])

        return "".join(result_parts)

    @staticmethod
    def _check_counts(template: str, placeholders: Sequence[PlaceholderInfo], bindings: Sequence[Binding]) -> None:
        if len(placeholders) > len(bindings):
            msg = f"Query has {len(placeholders)} placeholder(s) but only {len(bindings)} parameter(s) are bound"
            raise MissingParameterError(msg, template)
        if len(placeholders) < len(bindings):
            msg = f"{len(bindings)} parameter(s) are bound but query has only {len(placeholders)} placeholder(s)"
            raise ExtraParameterError(msg, template)
