"""Tests for the rule library: pass/fail tables, messages and keys."""

from __future__ import annotations

from typing import Any

import pytest

from model_validation import ValidationContext, rules
from model_validation.rules import (
    CheckRule,
    LengthRule,
    NotBlankRule,
    NotNullRule,
    RangeRule,
    RuleKind,
)


def _assert_valid(validate_name: Any, rule: rules.Rule, value: Any) -> None:
    result = validate_name(rule, value)
    assert result.is_valid, f"{value!r} should be valid: {result.to_dict()}"


def _assert_invalid(validate_name: Any, rule: rules.Rule, value: Any) -> None:
    result = validate_name(rule, value)
    assert not result.is_valid, f"{value!r} should not be valid"


# --- not null ---------------------------------------------------------------


class TestNotNull:
    @pytest.mark.parametrize("value", ["Dave", 123, 0, False, ""])
    def test_valid(self, validate_name: Any, value: Any) -> None:
        _assert_valid(validate_name, rules.not_null(), value)

    def test_none_is_invalid(self, validate_name: Any) -> None:
        _assert_invalid(validate_name, rules.not_null(), None)

    def test_uses_default_message(self, validate_name: Any) -> None:
        result = validate_name(rules.not_null(), None)

        assert result.results[0].messages == ["Please supply a value"]
        assert result.results[0].error_keys == ["not-null"]

    def test_uses_custom_message(self, validate_name: Any) -> None:
        result = validate_name(rules.not_null({"message": "Value please!"}), None)

        assert result.results[0].messages == ["Value please!"]


# --- not blank --------------------------------------------------------------


class TestNotBlank:
    @pytest.mark.parametrize("value", [None, "", "   ", "\t\t", " \n "])
    def test_invalid(self, validate_name: Any, value: Any) -> None:
        _assert_invalid(validate_name, rules.not_blank(), value)

    @pytest.mark.parametrize("value", ["Dave", " x ", 123, 0, 1.5, [], object()])
    def test_valid(self, validate_name: Any, value: Any) -> None:
        _assert_valid(validate_name, rules.not_blank(), value)

    def test_key(self) -> None:
        assert rules.not_blank().key == "not-blank"


# --- length -----------------------------------------------------------------


class TestLength:
    @pytest.mark.parametrize("value", [None, "", 1])
    def test_min_only_invalid(self, validate_name: Any, value: Any) -> None:
        _assert_invalid(validate_name, rules.length(min=2), value)

    @pytest.mark.parametrize("value", ["  ", "ab", 12])
    def test_min_only_valid(self, validate_name: Any, value: Any) -> None:
        _assert_valid(validate_name, rules.length(min=2), value)

    @pytest.mark.parametrize("value", [None, "      ", "askjdflaskdf", 123456])
    def test_max_only_invalid(self, validate_name: Any, value: Any) -> None:
        _assert_invalid(validate_name, rules.length(max=5), value)

    @pytest.mark.parametrize("value", [12345, "hello", "1", ""])
    def test_max_only_valid(self, validate_name: Any, value: Any) -> None:
        _assert_valid(validate_name, rules.length(max=5), value)

    @pytest.mark.parametrize("value", ["", "  ", "\t\t", "  A  "])
    def test_min_trimmed_invalid(self, validate_name: Any, value: Any) -> None:
        _assert_invalid(validate_name, rules.length(min=2, trim=True), value)

    @pytest.mark.parametrize("value", ["ab", 12])
    def test_min_trimmed_valid(self, validate_name: Any, value: Any) -> None:
        _assert_valid(validate_name, rules.length(min=2, trim=True), value)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "  ",
            "\t\t",
            "  A  ",
            "     A",
            "A     ",
            "  AAAAAA  ",
            "     AAAAAAA",
            "AAAAAAA    ",
        ],
    )
    def test_min_max_trimmed_invalid(self, validate_name: Any, value: Any) -> None:
        rule = rules.length({"min": 2, "max": 5, "trim": True})
        _assert_invalid(validate_name, rule, value)

    @pytest.mark.parametrize(
        "value",
        ["ab", "abc", "abcd", "abcde", "  AAAA   ", "AAAA   ", 12, 123, 1234, 12345],
    )
    def test_min_max_trimmed_valid(self, validate_name: Any, value: Any) -> None:
        rule = rules.length({"min": 2, "max": 5, "trim": True})
        _assert_valid(validate_name, rule, value)

    @pytest.mark.parametrize("value", ["", "1"])
    def test_min_max_untrimmed_invalid(self, validate_name: Any, value: Any) -> None:
        _assert_invalid(validate_name, rules.length(min=2, max=5), value)

    def test_min_max_untrimmed_valid(self, validate_name: Any) -> None:
        _assert_valid(validate_name, rules.length(min=2, max=5), "123")

    def test_without_bounds_accepts_none(self, validate_name: Any) -> None:
        _assert_valid(validate_name, rules.length(), None)

    def test_float_measured_by_canonical_text(self, validate_name: Any) -> None:
        # 12.0 is "12", 1.25 is "1.25"
        _assert_valid(validate_name, rules.length(max=2), 12.0)
        _assert_invalid(validate_name, rules.length(max=3), 1.25)

    def test_default_message_describes_bounds(self) -> None:
        expected = "Must be between 2 and 5 characters"
        assert rules.length(min=2, max=5).message == expected
        assert rules.length(min=2).message == "Must be at least 2 characters"
        assert rules.length(max=5).message == "Must be no more than 5 characters"

    def test_custom_message_and_key(self, validate_name: Any) -> None:
        result = validate_name(rules.length(min=2, message="Too short"), "a")

        assert result.results[0].messages == ["Too short"]
        assert result.results[0].error_keys == ["string-length"]


# --- range ------------------------------------------------------------------


class TestRange:
    @pytest.mark.parametrize("value", ["male", "female"])
    def test_specified_value_valid(self, validate_name: Any, value: Any) -> None:
        _assert_valid(validate_name, rules.range(values=["male", "female"]), value)

    @pytest.mark.parametrize("value", [None, "Male", "MALE", "pending", "tbc"])
    def test_unspecified_value_invalid(self, validate_name: Any, value: Any) -> None:
        _assert_invalid(validate_name, rules.range(values=["male", "female"]), value)

    @pytest.mark.parametrize("value", ["male", "female", "MALE", "FEMALE"])
    def test_ignore_case_valid(self, validate_name: Any, value: Any) -> None:
        rule = rules.range({"values": ["male", "female"], "ignoreCase": True})
        _assert_valid(validate_name, rule, value)

    @pytest.mark.parametrize("value", [None, "pending", "tbc"])
    def test_ignore_case_invalid(self, validate_name: Any, value: Any) -> None:
        rule = rules.range(values=["male", "female"], ignore_case=True)
        _assert_invalid(validate_name, rule, value)

    def test_none_fails_even_when_listed(self, validate_name: Any) -> None:
        _assert_invalid(validate_name, rules.range(values=[None, "x"]), None)

    def test_non_string_values(self, validate_name: Any) -> None:
        rule = rules.range([1, 2, 3], ignore_case=True)

        _assert_valid(validate_name, rule, 2)
        _assert_invalid(validate_name, rule, 4)

    def test_positional_values(self) -> None:
        rule = rules.range(["a", "b"])

        assert rule.values == ("a", "b")
        assert rule.ignore_case is False


# --- custom check -----------------------------------------------------------


def _contains_monkey(value: Any, context: ValidationContext) -> bool:
    return "monkey" in str(value)


class TestCheck:
    def test_not_matching_rule(self, validate_name: Any) -> None:
        message = "Needs to contain the word monkey"
        rule = rules.check(_contains_monkey, {"message": message})
        result = validate_name(rule, "asdf")

        assert not result.is_valid
        assert result.results[0].messages == ["Needs to contain the word monkey"]
        assert result.results[0].error_keys == ["custom"]

    def test_matching_rule(self, validate_name: Any) -> None:
        rule = rules.check(_contains_monkey, message="Needs to contain the word monkey")
        _assert_valid(validate_name, rule, "monkey man")

    def test_caller_supplied_key(self) -> None:
        rule = rules.check(_contains_monkey, key="monkey", message="Monkeys only")

        assert rule.key == "monkey"

    def test_predicate_receives_context(self) -> None:
        seen: list[ValidationContext] = []

        def predicate(value: Any, context: ValidationContext) -> bool:
            seen.append(context)
            return True

        rule = rules.check(predicate)
        assert rule("x") is True
        assert seen[0].attr == ""

    def test_truthiness_of_predicate_result(self) -> None:
        assert rules.check(lambda value, ctx: "yes")("x") is True
        assert rules.check(lambda value, ctx: 0)("x") is False


# --- nested -----------------------------------------------------------------


class TestValid:
    def test_can_be_declared(self) -> None:
        rule = rules.valid({})

        assert rule.kind is RuleKind.VALID
        assert rule.key == "valid"


# --- catalog ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("rule", "cls", "key"),
    [
        (rules.not_null(), NotNullRule, "not-null"),
        (rules.not_blank(), NotBlankRule, "not-blank"),
        (rules.length(min=1), LengthRule, "string-length"),
        (rules.range(values=["a"]), RangeRule, "range"),
        (rules.check(_contains_monkey), CheckRule, "custom"),
    ],
)
def test_factories_build_expected_rule(rule: rules.Rule, cls: type, key: str) -> None:
    assert isinstance(rule, cls)
    assert rule.key == key
    assert rule.kind.value == key
