"""Ports: protocols at the validator and model boundaries."""

from __future__ import annotations

from .validation import IAttributeSource, IAttributeValidator, IValidationListener

__all__ = [
    "IAttributeSource",
    "IAttributeValidator",
    "IValidationListener",
]
