"""
Rule base class, rule kinds and the evaluation context.

Every rule is a frozen pydantic model: its configuration is validated once
when the rule is built and can never change afterwards, so a single rule
instance can be shared by any number of validators.

New rules are added by subclassing :class:`Rule`, declaring their options
as fields and implementing ``evaluate``.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..primitives.exceptions import RuleConfigurationError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Rule")


class RuleKind(str, Enum):
    """The fixed catalog of rule kinds, valued by their default failure key."""

    NOT_NULL = "not-null"
    NOT_BLANK = "not-blank"
    LENGTH = "string-length"
    RANGE = "range"
    CHECK = "custom"
    VALID = "valid"


def _empty_values() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class ValidationContext:
    """
    Read-only context handed to every rule evaluation.

    Attributes:
        values: The attribute values under validation (read-only view).
        attr: Name of the attribute being checked.
        path: Dotted path of the attribute, currently always ``attr``.
        model: The owning model, when validation was triggered by one.
    """

    values: Mapping[str, Any] = field(default_factory=_empty_values)
    attr: str = ""
    path: str = ""
    model: Any = None

    def get(self, name: str, default: Any = None) -> Any:
        """Return another attribute's value from the same validation call."""
        return self.values.get(name, default)

    def for_attr(self, attr: str, path: str | None = None) -> ValidationContext:
        """Return a copy of this context pointing at *attr*."""
        return ValidationContext(
            values=self.values,
            attr=attr,
            path=path or attr,
            model=self.model,
        )


class Rule(BaseModel):
    """
    A single named check against one attribute value.

    Subclasses set ``kind``, declare their options as fields and implement
    :meth:`evaluate`.  ``key`` and ``message`` describe the failure; ``key``
    follows ``kind`` and is not configurable.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    kind: ClassVar[RuleKind]

    message: str

    @property
    def key(self) -> str:
        """Stable failure category reported with every error of this rule."""
        return self.kind.value

    @abstractmethod
    def evaluate(self, value: Any, context: ValidationContext) -> bool:
        """
        Decide whether *value* passes this rule.

        Args:
            value: The raw attribute value (``None`` when missing).
            context: The surrounding validation context.

        Returns:
            True if the value is acceptable.
        """
        ...

    def __call__(self, value: Any, context: ValidationContext | None = None) -> bool:
        if context is None:
            context = ValidationContext()
        return self.evaluate(value, context)

    @classmethod
    def recognized_options(cls) -> set[str]:
        """Option names (and aliases) this rule understands."""
        names: set[str] = set()
        for name, info in cls.model_fields.items():
            names.add(name)
            if info.alias:
                names.add(info.alias)
        return names

    @classmethod
    def configure(
        cls: type[R],
        options: Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> R:
        """
        Build a rule from an options mapping plus keyword overrides.

        Options the rule does not recognise are ignored.

        Raises:
            RuleConfigurationError: If the options are invalid or contradictory.
        """
        merged: dict[str, Any] = {**(options or {}), **overrides}
        ignored = sorted(set(merged) - cls.recognized_options())
        if ignored:
            logger.debug(
                "Ignoring unrecognised options for %s rule: %s",
                cls.kind.value,
                ", ".join(ignored),
            )
            for name in ignored:
                merged.pop(name)
        # None means "use the default" for every option.
        config = {name: value for name, value in merged.items() if value is not None}
        try:
            return cls(**config)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            loc = first.get("loc", ())
            option = ".".join(str(p) for p in loc) or None
            raise RuleConfigurationError(
                cls.kind.value, first.get("msg", "invalid option"), option=option
            ) from exc
