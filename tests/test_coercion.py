"""Tests for the canonical text form used by string-shaped rules."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest

from model_validation.rules.coercion import to_text


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("", ""),
        ("  abc ", "  abc "),
        (0, "0"),
        (12345, "12345"),
        (-7, "-7"),
        (True, "true"),
        (False, "false"),
        (12.0, "12"),
        (-3.0, "-3"),
        (1.25, "1.25"),
        (0.1, "0.1"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (Decimal("12.00"), "12"),
        (Decimal("1.50"), "1.5"),
        (Decimal("NaN"), "NaN"),
    ],
)
def test_to_text(value: Any, expected: str | None) -> None:
    assert to_text(value) == expected


def test_other_objects_use_str() -> None:
    class Code:
        def __str__(self) -> str:
            return "XY"

    assert to_text(Code()) == "XY"
