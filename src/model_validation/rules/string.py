"""String-shaped rules: not_blank, length.

Both rules measure the canonical text form of a value
(see :func:`~model_validation.rules.coercion.to_text`), so numbers are
checked by their digits.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, ClassVar

from pydantic import Field, model_validator

from .base import Rule, RuleKind, ValidationContext
from .coercion import to_text


class NotBlankRule(Rule):
    """Fails for ``None`` and for text that is empty once whitespace is stripped.

    Values that are neither text nor numbers always pass.
    """

    kind: ClassVar[RuleKind] = RuleKind.NOT_BLANK

    message: str = "Please supply a value"

    def evaluate(self, value: Any, context: ValidationContext) -> bool:
        if value is None:
            return False
        if isinstance(value, (str, int, float, Decimal)):
            text = to_text(value) or ""
            return bool(text.strip())
        return True


def _describe_bounds(min_length: Any, max_length: Any) -> str:
    if min_length is not None and max_length is not None:
        return f"Must be between {min_length} and {max_length} characters"
    if min_length is not None:
        return f"Must be at least {min_length} characters"
    if max_length is not None:
        return f"Must be no more than {max_length} characters"
    return "Invalid length"


class LengthRule(Rule):
    """
    Checks the length of a value's text form against optional bounds.

    Omitted bounds are not checked.  With ``trim`` the length is taken after
    stripping leading and trailing whitespace.  A missing value fails as
    soon as either bound is configured.
    """

    kind: ClassVar[RuleKind] = RuleKind.LENGTH

    message: str = "Invalid length"
    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)
    trim: bool = False

    @model_validator(mode="before")
    @classmethod
    def _default_message(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("message") is None:
            message = _describe_bounds(data.get("min"), data.get("max"))
            data = {**data, "message": message}
        return data

    @model_validator(mode="after")
    def _check_bounds(self) -> LengthRule:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    @property
    def has_bounds(self) -> bool:
        return self.min is not None or self.max is not None

    def evaluate(self, value: Any, context: ValidationContext) -> bool:
        text = to_text(value)
        if text is None:
            return not self.has_bounds
        if self.trim:
            text = text.strip()
        length = len(text)
        if self.min is not None and length < self.min:
            return False
        return not (self.max is not None and length > self.max)
