"""Shared fixtures for model-validation tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from model_validation import ModelValidator, ValidationResult, rules
from model_validation.domain import AttributeModel


@pytest.fixture
def product_validator() -> ModelValidator:
    """code/name length 2-5, description not null."""
    return ModelValidator(
        {
            "code": rules.length(min=2, max=5, message="Between 2 and 5"),
            "name": rules.length(min=2, max=5, message="Between 2 and 5"),
            "description": rules.not_null(message="Not null"),
        }
    )


@pytest.fixture
def validate_name() -> Callable[[rules.Rule, Any], ValidationResult]:
    """Validate a model whose ``name`` attribute holds the given value."""

    def _validate(rule: rules.Rule, value: Any) -> ValidationResult:
        validator = ModelValidator({"name": rule})
        return validator.validate(AttributeModel(name=value))

    return _validate
