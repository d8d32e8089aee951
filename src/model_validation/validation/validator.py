"""ModelValidator — evaluates a rule set and aggregates failures."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from ..ports.validation import IAttributeSource
from ..rules.base import Rule, ValidationContext
from .result import AttrResult, RuleError, ValidationResult
from .rule_set import RuleSet, RuleSpec, normalize_rules

logger = logging.getLogger(__name__)

INSTANCE_ATTR = "__instance__"
"""Pseudo-attribute under which instance-rule failures are reported."""


def _read_values(source: Mapping[str, Any] | IAttributeSource) -> Mapping[str, Any]:
    if isinstance(source, Mapping):
        return source
    if isinstance(source, IAttributeSource):
        return source.attributes
    raise TypeError(
        f"Cannot validate {type(source).__name__}: expected a mapping "
        "or an object with an 'attributes' mapping"
    )


class ModelValidator:
    """Validates attribute values against a :class:`RuleSet`.

    Unlike fail-fast validation, every rule of every relevant attribute runs
    and **all** failures are collected.  Rules never raise for bad data;
    exceptions from custom predicates propagate unchanged.

    Usage::

        validator = ModelValidator({
            "code": rules.length(min=2, max=5, message="Between 2 and 5"),
            "description": rules.not_null(message="Not null"),
        })
        result = validator.validate({"code": "1"})
        result = validator.validate_attrs({"code": "123"})

    ``instance_rules`` check the model as a whole: they receive the full
    values mapping and report under :data:`INSTANCE_ATTR`.  They always run
    in :meth:`validate`; :meth:`validate_attrs` runs them only when
    ``validate_instance_on_attrs`` is set.
    """

    def __init__(
        self,
        attribute_rules: RuleSet | Mapping[str, RuleSpec] | None = None,
        instance_rules: RuleSpec | None = None,
        *,
        validate_instance_on_attrs: bool = False,
    ) -> None:
        self._rule_set = (
            attribute_rules
            if isinstance(attribute_rules, RuleSet)
            else RuleSet(attribute_rules)
        )
        self._instance_rules: tuple[Rule, ...] = (
            normalize_rules(INSTANCE_ATTR, instance_rules)
            if instance_rules is not None
            else ()
        )
        self._validate_instance_on_attrs = validate_instance_on_attrs

    # ── Configuration ────────────────────────────────────────────

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    @property
    def instance_rules(self) -> tuple[Rule, ...]:
        return self._instance_rules

    @property
    def validate_instance_on_attrs(self) -> bool:
        return self._validate_instance_on_attrs

    # ── Evaluation ───────────────────────────────────────────────

    def validate(
        self,
        source: Mapping[str, Any] | IAttributeSource,
        *,
        model: Any = None,
    ) -> ValidationResult:
        """Check every declared attribute of *source*.

        Attributes absent from *source* are checked as ``None``.  When
        *source* is a model rather than a mapping it is also passed to the
        rules as ``context.model``.
        """
        values = _read_values(source)
        if model is None and not isinstance(source, Mapping):
            model = source
        return self._run(self._rule_set.attrs, values, model, include_instance=True)

    def validate_attrs(
        self,
        values: Mapping[str, Any],
        *,
        model: Any = None,
        all_values: Mapping[str, Any] | None = None,
    ) -> ValidationResult:
        """Check only the attributes present as keys in *values*.

        Declared attributes missing from *values* are skipped, as are keys
        that have no rules.  *all_values* is the complete attribute mapping
        the changed *values* belong to; rules see it through their context
        and instance rules are evaluated against it.  It defaults to
        *values*.
        """
        attrs = [attr for attr in self._rule_set if attr in values]
        return self._run(
            attrs,
            values,
            model,
            include_instance=self._validate_instance_on_attrs,
            all_values=all_values,
        )

    def is_valid(self, source: Mapping[str, Any] | IAttributeSource) -> bool:
        return self.validate(source).is_valid

    # ── Internals ────────────────────────────────────────────────

    def _run(
        self,
        attrs: Iterable[str],
        values: Mapping[str, Any],
        model: Any,
        *,
        include_instance: bool,
        all_values: Mapping[str, Any] | None = None,
    ) -> ValidationResult:
        view: Mapping[str, Any] = MappingProxyType(dict(values))
        full_view: Mapping[str, Any] = (
            view if all_values is None else MappingProxyType(dict(all_values))
        )
        base_context = ValidationContext(values=full_view, model=model)

        results: list[AttrResult] = []
        checked = 0
        for attr in attrs:
            checked += 1
            failed = self._check(
                self._rule_set[attr], view.get(attr), base_context.for_attr(attr)
            )
            if failed is not None:
                results.append(failed)

        if include_instance and self._instance_rules:
            checked += 1
            failed = self._check(
                self._instance_rules, full_view, base_context.for_attr(INSTANCE_ATTR)
            )
            if failed is not None:
                results.append(failed)

        logger.debug(
            "Validated %d attribute(s): %d invalid",
            checked,
            len(results),
        )
        return ValidationResult(results=tuple(results))

    @staticmethod
    def _check(
        rules: Sequence[Rule],
        value: Any,
        context: ValidationContext,
    ) -> AttrResult | None:
        errors = [
            RuleError(message=rule.message, key=rule.key)
            for rule in rules
            if not rule.evaluate(value, context)
        ]
        if not errors:
            return None
        return AttrResult(attr=context.attr, path=context.path, errors=tuple(errors))
