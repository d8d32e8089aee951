"""Domain: attribute models, listeners and the validation mixin."""

from __future__ import annotations

from .listeners import ListenerRegistry
from .mixins import ValidatedModel, ValidationMixin
from .model import AttributeModel

__all__ = [
    "AttributeModel",
    "ListenerRegistry",
    "ValidatedModel",
    "ValidationMixin",
]
