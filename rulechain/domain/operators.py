"""Comparison operators available to categorization rules.

Each operator maps to a pure function ``(field_value, operand) -> bool``. Text
operators only match string field values; numeric operators parse both sides
as floats and treat anything unparsable as NaN, so a malformed number simply
never matches.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

Predicate = Callable[[Any, Any], bool]


class RuleOperator(str, Enum):
    IS = "is"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    CONTAINS = "contains"
    EQUALS = "equals"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"

    @property
    def is_numeric(self) -> bool:
        return self in _NUMERIC_OPERATORS


_NUMERIC_OPERATORS = frozenset(
    {RuleOperator.EQUALS, RuleOperator.GREATER_THAN, RuleOperator.LESS_THAN}
)


def to_number(value: Any) -> float:
    """Parse ``value`` as a float, returning NaN when it is not numeric."""

    if isinstance(value, bool) or value is None:
        return math.nan
    try:
        return float(str(value).strip())
    except ValueError:
        return math.nan


def _text(predicate: Callable[[str, str], bool]) -> Predicate:
    def evaluate(field_value: Any, operand: Any) -> bool:
        if not isinstance(field_value, str) or operand is None:
            return False
        return predicate(field_value, str(operand))

    return evaluate


def _numeric(predicate: Callable[[float, float], bool]) -> Predicate:
    def evaluate(field_value: Any, operand: Any) -> bool:
        return predicate(to_number(field_value), to_number(operand))

    return evaluate


OPERATIONS: Mapping[RuleOperator, Predicate] = MappingProxyType(
    {
        RuleOperator.IS: _text(lambda text, operand: text == operand),
        RuleOperator.STARTS_WITH: _text(str.startswith),
        # an empty suffix only matches an empty field
        RuleOperator.ENDS_WITH: _text(
            lambda text, operand: text.endswith(operand) if operand else not text
        ),
        RuleOperator.CONTAINS: _text(lambda text, operand: operand in text),
        RuleOperator.EQUALS: _numeric(lambda number, operand: number == operand),
        RuleOperator.GREATER_THAN: _numeric(lambda number, operand: number > operand),
        RuleOperator.LESS_THAN: _numeric(lambda number, operand: number < operand),
    }
)


def evaluate(operator: RuleOperator | str, field_value: Any, operand: Any) -> bool:
    """Apply ``operator`` to an entry field value and the rule operand."""

    return OPERATIONS[RuleOperator(operator)](field_value, operand)


__all__ = ["OPERATIONS", "RuleOperator", "evaluate", "to_number"]
