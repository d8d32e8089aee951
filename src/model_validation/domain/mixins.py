"""ValidationMixin — validates attribute changes on a model."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from ..validation.validator import ModelValidator
from .model import AttributeModel

if TYPE_CHECKING:
    from ..ports.validation import IAttributeValidator, IValidationListener
    from ..rules.base import Rule
    from ..validation.result import ValidationResult
    from ..validation.rule_set import RuleSet, RuleSpec

logger = logging.getLogger(__name__)


class ValidationMixin:
    """Binds a :class:`ModelValidator` to a model's mutation hook.

    Subclasses declare ``attribute_rules`` (and optionally ``instance_rules``)
    as class attributes.  The validator is built once per class, so a bad
    rule set fails when the class is defined.

    After every change the changed attributes, and only those, are
    validated.  Instance rules, when ``validate_instance_on_change`` is set,
    see the whole model.  An invalid result triggers ``"error"`` with
    ``(model, result)``; a valid one triggers nothing.  The change itself is
    never blocked or rolled back.

    The host class must provide ``attributes``, ``trigger()`` and the
    ``_attributes_changed()`` hook, as :class:`AttributeModel` does.
    """

    attribute_rules: ClassVar[RuleSet | Mapping[str, RuleSpec] | None] = None
    instance_rules: ClassVar[Rule | list[Rule] | None] = None
    validate_instance_on_change: ClassVar[bool] = False

    validator: ClassVar[IAttributeValidator]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.validator = ModelValidator(
            cls.attribute_rules,
            cls.instance_rules,
            validate_instance_on_attrs=cls.validate_instance_on_change,
        )

    def _attributes_changed(self, changed: Mapping[str, Any]) -> None:
        super()._attributes_changed(changed)  # type: ignore[misc]
        attributes = self.attributes  # type: ignore[attr-defined]
        result = self.validator.validate_attrs(
            changed, model=self, all_values=attributes
        )
        if not result.is_valid:
            logger.debug(
                "%s change rejected by validation: %s",
                type(self).__name__,
                ", ".join(result.attrs),
            )
            self.trigger("error", self, result)  # type: ignore[attr-defined]

    def on_error(self, listener: IValidationListener) -> None:
        """Register *listener* for ``"error"`` notifications."""
        self.on("error", listener)  # type: ignore[attr-defined]

    def validate(self) -> ValidationResult:
        """Validate every declared attribute, plus instance rules."""
        return self.validator.validate(self)  # type: ignore[arg-type]

    def is_valid(self) -> bool:
        return self.validate().is_valid


class ValidatedModel(ValidationMixin, AttributeModel):
    """An :class:`AttributeModel` that validates its own changes.

    Usage::

        class Product(ValidatedModel):
            attribute_rules = {
                "code": rules.length(min=2, max=5, message="Between 2 and 5"),
            }

        product = Product()
        product.on("error", lambda model, result: print(result.to_dict()))
        product.set(code="1")
    """
