"""Membership rule: range."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .base import Rule, RuleKind, ValidationContext


def _fold(value: Any) -> Any:
    return value.casefold() if isinstance(value, str) else value


class RangeRule(Rule):
    """
    Passes when the value is one of the allowed ``values``.

    With ``ignore_case`` (alias ``ignoreCase``) string values are compared
    case-insensitively on both sides; other values compare as-is.
    ``None`` always fails, even when listed.
    """

    kind: ClassVar[RuleKind] = RuleKind.RANGE

    message: str = "Please select a valid value"
    values: tuple[Any, ...] = Field(min_length=1)
    ignore_case: bool = Field(default=False, alias="ignoreCase")

    def evaluate(self, value: Any, context: ValidationContext) -> bool:
        if value is None:
            return False
        if self.ignore_case:
            folded = _fold(value)
            return any(_fold(allowed) == folded for allowed in self.values)
        return value in self.values
