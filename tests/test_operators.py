"""Unit tests for the rule comparison operators."""

import math

import pytest

from rulechain.domain.operators import OPERATIONS, RuleOperator, evaluate, to_number


def test_every_operator_has_a_predicate():
    assert set(OPERATIONS) == set(RuleOperator)


@pytest.mark.parametrize(
    ("operator", "field_value", "operand", "expected"),
    [
        ("is", "COFFEE", "COFFEE", True),
        ("is", "coffee", "COFFEE", False),
        ("is", "COFFEE SHOP", "COFFEE", False),
        ("startsWith", "COFFEE SHOP", "COF", True),
        ("startsWith", "THE COFFEE SHOP", "COF", False),
        ("endsWith", "COFFEE SHOP", "SHOP", True),
        ("endsWith", "SHOP COFFEE", "SHOP", False),
        # an empty suffix only matches an empty field
        ("endsWith", "COFFEE", "", False),
        ("endsWith", "", "", True),
        ("startsWith", "COFFEE", "", True),
        ("contains", "COFFEE", "", True),
        ("contains", "BIG COFFEE SHOP", "FEE S", True),
        ("contains", "TEA HOUSE", "COFFEE", False),
    ],
)
def test_text_operators(operator, field_value, operand, expected):
    assert evaluate(operator, field_value, operand) is expected


@pytest.mark.parametrize("field_value", [None, 42, 4.2, ["COFFEE"]])
def test_text_operators_ignore_non_string_fields(field_value):
    for operator in ("is", "startsWith", "endsWith", "contains"):
        assert evaluate(operator, field_value, "4") is False


@pytest.mark.parametrize(
    ("operator", "field_value", "operand", "expected"),
    [
        ("equals", "100", "100.0", True),
        ("equals", 100, "100", True),
        ("equals", "99.99", "100", False),
        ("greaterThan", "150.5", "100", True),
        ("greaterThan", "100", "100", False),
        ("lessThan", "-3", "0", True),
        ("lessThan", 12.5, "12.5", False),
    ],
)
def test_numeric_operators(operator, field_value, operand, expected):
    assert evaluate(operator, field_value, operand) is expected


@pytest.mark.parametrize("field_value", ["abc", "", None, True, "12abc"])
def test_malformed_numbers_never_match(field_value):
    for operator in ("equals", "greaterThan", "lessThan"):
        assert evaluate(operator, field_value, "100") is False


def test_nan_is_not_equal_to_itself():
    assert evaluate(RuleOperator.EQUALS, "nan", "nan") is False


def test_to_number_parses_padded_text():
    assert to_number(" 42.5 ") == 42.5
    assert math.isnan(to_number("forty"))
    assert math.isnan(to_number(False))


def test_unknown_operator_is_rejected():
    with pytest.raises(ValueError):
        evaluate("matches", "COFFEE", "COFFEE")


def test_numeric_flag():
    assert RuleOperator.GREATER_THAN.is_numeric
    assert not RuleOperator.CONTAINS.is_numeric
