"""Configuration and enforcement exceptions for model-validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


class ModelValidationError(Exception):
    """Root exception for the entire model-validation package."""


class ConfigurationError(ModelValidationError):
    """Base class for errors in rule or rule-set configuration.

    Raised at construction time, never while evaluating values.
    """


class RuleConfigurationError(ConfigurationError):
    """Raised when a rule factory receives invalid or contradictory options."""

    def __init__(
        self,
        rule: str,
        message: str,
        option: str | None = None,
    ) -> None:
        self.rule = rule
        self.option = option
        location = f"{rule}.{option}" if option else rule
        super().__init__(f"Invalid configuration for rule '{location}': {message}")


class RuleSetError(ConfigurationError):
    """Raised when an attribute rule set is malformed.

    Usage: RuleSet raises this for attributes declared with no rules or
    with entries that are not Rule instances.
    """

    def __init__(self, attr: str, message: str) -> None:
        self.attr = attr
        super().__init__(f"Invalid rules for attribute '{attr}': {message}")


class UnsupportedRuleError(ModelValidationError, NotImplementedError):
    """Raised when a placeholder rule is evaluated."""


class AttributeValidationError(ModelValidationError):
    """Raised when a caller asks for a validation result to be enforced.

    Carries the full result plus structured errors: ``{attr: [messages]}``.
    """

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        self.errors: dict[str, list[str]] = result.errors_by_attr()
        super().__init__(str(self.errors))
