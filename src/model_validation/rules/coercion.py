"""Canonical text form for values checked by string-shaped rules.

``length`` and ``not_blank`` both measure the text form of a value, so a
number like ``12345`` is checked as the five characters ``"12345"``.  The
conversion never depends on locale settings.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any


def _float_to_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _decimal_to_text(value: Decimal) -> str:
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "Infinity" if value > 0 else "-Infinity"
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


def to_text(value: Any) -> str | None:
    """Return the canonical text form of *value*, or ``None`` for ``None``.

    - ``str`` is returned unchanged.
    - ``bool`` becomes ``"true"`` / ``"false"``.
    - ``int`` becomes its decimal digits.
    - ``float`` and ``Decimal`` drop a zero fractional part (``12.0`` → ``"12"``).
    - Anything else goes through ``str()``.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_to_text(value)
    if isinstance(value, Decimal):
        return _decimal_to_text(value)
    return str(value)
