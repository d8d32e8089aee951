"""Validation system: RuleSet, RuleSetBuilder, ModelValidator, ValidationResult."""

from __future__ import annotations

from .builder import RuleSetBuilder
from .result import AttrResult, RuleError, ValidationResult
from .rule_set import RuleSet, RuleSpec
from .validator import INSTANCE_ATTR, ModelValidator

__all__ = [
    "INSTANCE_ATTR",
    "AttrResult",
    "ModelValidator",
    "RuleError",
    "RuleSet",
    "RuleSetBuilder",
    "RuleSpec",
    "ValidationResult",
]
