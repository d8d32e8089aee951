"""Presence rule: not_null."""

from __future__ import annotations

from typing import Any, ClassVar

from .base import Rule, RuleKind, ValidationContext


class NotNullRule(Rule):
    """Passes for any value except ``None`` (``0``, ``False`` and ``""`` pass)."""

    kind: ClassVar[RuleKind] = RuleKind.NOT_NULL

    message: str = "Please supply a value"

    def evaluate(self, value: Any, context: ValidationContext) -> bool:
        return value is not None
