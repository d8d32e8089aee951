"""Primitives: exception hierarchy."""

from __future__ import annotations

from .exceptions import (
    AttributeValidationError,
    ConfigurationError,
    ModelValidationError,
    RuleConfigurationError,
    RuleSetError,
    UnsupportedRuleError,
)

__all__ = [
    "AttributeValidationError",
    "ConfigurationError",
    "ModelValidationError",
    "RuleConfigurationError",
    "RuleSetError",
    "UnsupportedRuleError",
]
