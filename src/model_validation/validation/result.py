"""ValidationResult — structured, ordered validation outcome."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from ..primitives.exceptions import AttributeValidationError


class RuleError(BaseModel):
    """One failing rule: its message and machine-readable key."""

    model_config = ConfigDict(frozen=True)

    message: str
    key: str


class AttrResult(BaseModel):
    """Failures recorded for a single attribute, in rule-declaration order.

    ``path`` defaults to ``attr``.  An entry always holds at least one error.
    """

    model_config = ConfigDict(frozen=True)

    attr: str
    path: str = ""
    errors: tuple[RuleError, ...] = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _default_path(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("path"):
            data = {**data, "path": data.get("attr")}
        return data

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    @property
    def error_keys(self) -> list[str]:
        return [error.key for error in self.errors]


class ValidationResult(BaseModel):
    """Outcome of one validation call.

    ``results`` only lists attributes with at least one failing rule, in
    rule-set declaration order; ``is_valid`` is true exactly when it is empty.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure([AttrResult(attr="name", errors=[...])])
    """

    model_config = ConfigDict(frozen=True)

    results: tuple[AttrResult, ...] = ()

    @computed_field(alias="isValid")  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.results

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(
        cls, results: list[AttrResult] | tuple[AttrResult, ...]
    ) -> ValidationResult:
        return cls(results=tuple(results))

    # ── Queries ──────────────────────────────────────────────────

    def get(self, attr: str) -> AttrResult | None:
        """Return the failures recorded for *attr*, if any."""
        for result in self.results:
            if result.attr == attr:
                return result
        return None

    @property
    def attrs(self) -> list[str]:
        return [result.attr for result in self.results]

    def errors_by_attr(self) -> dict[str, list[str]]:
        """Flatten to ``{attr: [messages]}``."""
        return {result.attr: result.messages for result in self.results}

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine two results.

        Attributes keep their first-seen order; errors for an attribute
        present in both are concatenated.
        """
        merged: dict[str, AttrResult] = {r.attr: r for r in self.results}
        for result in other.results:
            existing = merged.get(result.attr)
            if existing is None:
                merged[result.attr] = result
            else:
                merged[result.attr] = AttrResult(
                    attr=existing.attr,
                    path=existing.path,
                    errors=existing.errors + result.errors,
                )
        return ValidationResult(results=tuple(merged.values()))

    # ── Boundary ─────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """The serialisable shape consumed by UI and logging code."""
        return {
            "isValid": self.is_valid,
            "results": [
                {
                    "attr": result.attr,
                    "path": result.path,
                    "errors": [
                        {"message": error.message, "key": error.key}
                        for error in result.errors
                    ],
                }
                for result in self.results
            ],
        }

    def raise_if_invalid(self) -> None:
        """Raise :class:`AttributeValidationError` when the result is invalid."""
        if not self.is_valid:
            raise AttributeValidationError(self)

    def __bool__(self) -> bool:
        return self.is_valid
