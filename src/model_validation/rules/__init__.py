"""
Rule library.

Each factory returns a configured, immutable :class:`Rule`.  Options may be
given as a mapping, as keyword arguments, or both (keywords win)::

    from model_validation import rules

    rules.length({"min": 2, "max": 5, "message": "Between 2 and 5"})
    rules.length(min=2, max=5, trim=True)
    rules.range(values=["male", "female"], ignore_case=True)
    rules.check(lambda value, ctx: "monkey" in str(value), message="Monkeys only")

Unrecognised options are ignored; invalid ones raise
:class:`~model_validation.primitives.exceptions.RuleConfigurationError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import Rule, RuleKind, ValidationContext
from .coercion import to_text
from .custom import CheckRule, Predicate
from .nested import ValidRule
from .null import NotNullRule
from .set import RangeRule
from .string import LengthRule, NotBlankRule

def not_null(
    options: Mapping[str, Any] | None = None, /, **kwargs: Any
) -> NotNullRule:
    """Value must not be ``None``.  Options: ``message``."""
    return NotNullRule.configure(options, **kwargs)


def not_blank(
    options: Mapping[str, Any] | None = None, /, **kwargs: Any
) -> NotBlankRule:
    """Value must not be ``None`` or whitespace-only text.  Options: ``message``."""
    return NotBlankRule.configure(options, **kwargs)


def length(options: Mapping[str, Any] | None = None, /, **kwargs: Any) -> LengthRule:
    """Text length within bounds.  Options: ``min``, ``max``, ``trim``, ``message``."""
    return LengthRule.configure(options, **kwargs)


def range(  # noqa: A001
    options: Mapping[str, Any] | Any = None, /, **kwargs: Any
) -> RangeRule:
    """
    Value must be one of ``values``.

    Options: ``values``, ``ignore_case`` (or ``ignoreCase``), ``message``.
    A non-mapping first argument is taken as ``values``.
    """
    if options is not None and not isinstance(options, Mapping):
        options = {"values": options}
    return RangeRule.configure(options, **kwargs)


def check(
    predicate: Predicate,
    options: Mapping[str, Any] | None = None,
    /,
    **kwargs: Any,
) -> CheckRule:
    """
    Value must satisfy ``predicate(value, context)``.

    Options: ``message``, ``key`` (defaults to ``"custom"``).
    """
    return CheckRule.configure(options, predicate=predicate, **kwargs)


def valid(options: Mapping[str, Any] | None = None, /, **kwargs: Any) -> ValidRule:
    """Placeholder for nested-model validation; evaluating it is unsupported."""
    return ValidRule.configure(options, **kwargs)


__all__ = [
    "CheckRule",
    "LengthRule",
    "NotBlankRule",
    "NotNullRule",
    "Predicate",
    "RangeRule",
    "Rule",
    "RuleKind",
    "ValidRule",
    "ValidationContext",
    "check",
    "length",
    "not_blank",
    "not_null",
    "range",
    "to_text",
    "valid",
]
