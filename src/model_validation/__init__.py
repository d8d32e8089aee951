"""model-validation — declarative attribute validation for key-value models.

Rules are attached per attribute; a validator evaluates them and returns an
ordered, structured result instead of raising on the first failure.
"""

from __future__ import annotations

from . import rules

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    AttributeModel,
    ListenerRegistry,
    ValidatedModel,
    ValidationMixin,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IAttributeSource, IAttributeValidator, IValidationListener

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    AttributeValidationError,
    ConfigurationError,
    ModelValidationError,
    RuleConfigurationError,
    RuleSetError,
    UnsupportedRuleError,
)

# ── Rules ────────────────────────────────────────────────────────
from .rules import Rule, RuleKind, ValidationContext

# ── Validation ───────────────────────────────────────────────────
from .validation import (
    INSTANCE_ATTR,
    AttrResult,
    ModelValidator,
    RuleError,
    RuleSet,
    RuleSetBuilder,
    ValidationResult,
)

__all__ = [
    "INSTANCE_ATTR",
    "AttrResult",
    "AttributeModel",
    "AttributeValidationError",
    "ConfigurationError",
    "IAttributeSource",
    "IAttributeValidator",
    "IValidationListener",
    "ListenerRegistry",
    "ModelValidationError",
    "ModelValidator",
    "Rule",
    "RuleConfigurationError",
    "RuleError",
    "RuleKind",
    "RuleSet",
    "RuleSetBuilder",
    "RuleSetError",
    "UnsupportedRuleError",
    "ValidatedModel",
    "ValidationContext",
    "ValidationMixin",
    "ValidationResult",
    "rules",
]
