"""
Fluent builder for constructing rule sets.

Example::

    rule_set = (
        RuleSetBuilder()
        .attr("code").length(min=2, max=5, message="Between 2 and 5")
        .attr("name").not_blank().length(max=50)
        .attr("gender").range(["male", "female"], ignore_case=True)
        .build()
    )

Rules attach to the most recent ``attr()``.  Returning to an attribute
appends to its existing rules.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import model_validation.rules as rules

from .rule_set import RuleSet


class RuleSetBuilder:
    """Accumulates rules per attribute, preserving declaration order."""

    def __init__(self) -> None:
        self._rules: dict[str, list[rules.Rule]] = {}
        self._current: str | None = None

    # -- attribute selection -------------------------------------------------

    def attr(self, name: str) -> RuleSetBuilder:
        """Select the attribute that following rules apply to."""
        self._rules.setdefault(name, [])
        self._current = name
        return self

    # -- rules ---------------------------------------------------------------

    def rule(self, rule: rules.Rule) -> RuleSetBuilder:
        """Attach an already-constructed rule to the current attribute."""
        self._current_list().append(rule)
        return self

    def not_null(
        self, options: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> RuleSetBuilder:
        return self.rule(rules.not_null(options, **kwargs))

    def not_blank(
        self, options: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> RuleSetBuilder:
        return self.rule(rules.not_blank(options, **kwargs))

    def length(
        self, options: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> RuleSetBuilder:
        return self.rule(rules.length(options, **kwargs))

    def range(  # noqa: A003
        self, options: Any = None, /, **kwargs: Any
    ) -> RuleSetBuilder:
        return self.rule(rules.range(options, **kwargs))

    def check(
        self,
        predicate: rules.Predicate,
        options: Mapping[str, Any] | None = None,
        /,
        **kwargs: Any,
    ) -> RuleSetBuilder:
        return self.rule(rules.check(predicate, options, **kwargs))

    def valid(
        self, options: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> RuleSetBuilder:
        return self.rule(rules.valid(options, **kwargs))

    # -- build ---------------------------------------------------------------

    def build(self) -> RuleSet:
        """
        Finalise and return the rule set.

        Raises:
            RuleSetError: If an attribute was selected but given no rules.
        """
        return RuleSet(self._rules)

    def reset(self) -> RuleSetBuilder:
        """Clear all rules and return ``self`` for reuse."""
        self._rules.clear()
        self._current = None
        return self

    # -- internals -----------------------------------------------------------

    def _current_list(self) -> list[rules.Rule]:
        if self._current is None:
            raise ValueError("Call attr() before adding rules")
        return self._rules[self._current]
