"""Related-object rule: valid (placeholder)."""

from __future__ import annotations

from typing import Any, ClassVar

from ..primitives.exceptions import UnsupportedRuleError
from .base import Rule, RuleKind, ValidationContext


class ValidRule(Rule):
    """
    Reserved for validating an attribute whose value is itself a model or a
    collection of models.

    The rule can be declared so rule sets can name the attributes it will
    cover, but evaluating it raises :class:`UnsupportedRuleError`.
    """

    kind: ClassVar[RuleKind] = RuleKind.VALID

    message: str = "Related value is invalid"

    def evaluate(self, value: Any, context: ValidationContext) -> bool:
        raise UnsupportedRuleError(
            f"Nested validation of '{context.path or context.attr}' is not supported"
        )
