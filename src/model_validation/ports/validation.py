"""Validation ports — what the validator reads and what listeners receive."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..validation.result import ValidationResult


@runtime_checkable
class IAttributeSource(Protocol):
    """Anything exposing a read view of its current attribute values."""

    @property
    def attributes(self) -> Mapping[str, Any]:
        ...


@runtime_checkable
class IAttributeValidator(Protocol):
    """Protocol for attribute validators.

    Implemented by
    :class:`~model_validation.validation.validator.ModelValidator`.
    """

    def validate(
        self,
        source: Mapping[str, Any] | IAttributeSource,
        *,
        model: Any = None,
    ) -> ValidationResult:
        """Check every declared attribute; missing attributes count as ``None``."""
        ...

    def validate_attrs(
        self,
        values: Mapping[str, Any],
        *,
        model: Any = None,
        all_values: Mapping[str, Any] | None = None,
    ) -> ValidationResult:
        """Check only the attributes present as keys in *values*."""
        ...


@runtime_checkable
class IValidationListener(Protocol):
    """Receives ``(model, result)`` when a model change fails validation."""

    def __call__(self, model: Any, result: ValidationResult) -> Any:
        ...
