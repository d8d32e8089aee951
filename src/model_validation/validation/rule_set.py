"""RuleSet — ordered, immutable mapping of attribute names to rules."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Union

from ..primitives.exceptions import RuleSetError
from ..rules.base import Rule

RuleSpec = Union[Rule, Sequence[Rule]]


def normalize_rules(attr: str, spec: RuleSpec) -> tuple[Rule, ...]:
    """Turn a single rule or a sequence of rules into a non-empty tuple.

    Raises:
        RuleSetError: If *spec* is empty or holds anything but rules.
    """
    if isinstance(spec, Rule):
        return (spec,)
    if isinstance(spec, (str, bytes)) or not isinstance(spec, Sequence):
        raise RuleSetError(
            attr, f"expected a Rule or a list of Rules, got {type(spec).__name__}"
        )
    rules = tuple(spec)
    if not rules:
        raise RuleSetError(attr, "at least one rule is required")
    for index, rule in enumerate(rules):
        if not isinstance(rule, Rule):
            raise RuleSetError(
                attr, f"entry {index} is {type(rule).__name__}, not a Rule"
            )
    return rules


class RuleSet(Mapping[str, tuple[Rule, ...]]):
    """
    Attribute name → ordered rules, in declaration order.

    Every attribute maps to at least one rule.  The set cannot be modified
    after construction; :meth:`extend` returns a new set.

    Usage::

        rule_set = RuleSet({
            "code": rules.length(min=2, max=5),
            "name": [rules.not_blank(), rules.length(max=50)],
        })
    """

    def __init__(self, attribute_rules: Mapping[str, RuleSpec] | None = None) -> None:
        if isinstance(attribute_rules, RuleSet):
            self._rules: dict[str, tuple[Rule, ...]] = dict(attribute_rules._rules)
            return
        self._rules = {}
        for attr, spec in (attribute_rules or {}).items():
            if not isinstance(attr, str) or not attr:
                raise RuleSetError(
                    str(attr), "attribute names must be non-empty strings"
                )
            self._rules[attr] = normalize_rules(attr, spec)

    def __getitem__(self, attr: str) -> tuple[Rule, ...]:
        return self._rules[attr]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        summary = ", ".join(
            f"{attr}=[{', '.join(rule.key for rule in rules)}]"
            for attr, rules in self._rules.items()
        )
        return f"RuleSet({summary})"

    @property
    def attrs(self) -> list[str]:
        return list(self._rules)

    def extend(self, attribute_rules: Mapping[str, RuleSpec]) -> RuleSet:
        """Return a new set with *attribute_rules* added.

        Rules for an attribute already present are appended after the
        existing ones; new attributes go last.
        """
        combined: dict[str, tuple[Rule, ...]] = dict(self._rules)
        for attr, rules in RuleSet(attribute_rules).items():
            combined[attr] = combined.get(attr, ()) + rules
        return RuleSet(combined)
