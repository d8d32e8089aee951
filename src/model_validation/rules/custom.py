"""Caller-defined rule: check."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

from pydantic import Field

from .base import Rule, RuleKind, ValidationContext

Predicate = Callable[[Any, ValidationContext], Any]


class CheckRule(Rule):
    """
    Delegates the decision to a caller-supplied predicate.

    The predicate receives the raw value and the validation context; its
    result is interpreted for truthiness.  Exceptions raised by the
    predicate are not caught.  Unlike the built-in rules, the failure key
    can be chosen with the ``key`` option.
    """

    kind: ClassVar[RuleKind] = RuleKind.CHECK

    custom_key: str = Field(RuleKind.CHECK.value, alias="key")
    message: str = "Invalid value"
    predicate: Predicate

    @property
    def key(self) -> str:
        return self.custom_key

    def evaluate(self, value: Any, context: ValidationContext) -> bool:
        return bool(self.predicate(value, context))
