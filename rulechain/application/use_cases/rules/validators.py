"""Validation helpers for rule use cases."""

import math
from typing import Any

from rulechain.domain.entities import Rule
from rulechain.domain.errors import InvalidRuleError
from rulechain.domain.operators import RuleOperator, to_number


def parse_operator(raw: Any) -> RuleOperator:
    """Return the operator named by ``raw`` or reject it."""

    try:
        return RuleOperator(raw)
    except ValueError as exc:
        allowed = ", ".join(operator.value for operator in RuleOperator)
        raise InvalidRuleError(
            f"Unsupported operator {raw!r}; expected one of: {allowed}"
        ) from exc


def normalize_value(raw: Any) -> str:
    """Store operands as text; numbers keep their literal form."""

    if raw is None:
        return ""
    if isinstance(raw, bool):
        raise InvalidRuleError("Rule value must be a string or a number")
    return str(raw)


def ensure_valid_rule(rule: Rule) -> None:
    """Reject rule content that could never be evaluated meaningfully."""

    if not isinstance(rule.category_id, str) or not rule.category_id.strip():
        raise InvalidRuleError("Rule category is required")
    if not isinstance(rule.property, str) or not rule.property.strip():
        raise InvalidRuleError("Rule property is required")

    operator = parse_operator(rule.operator)
    if operator.is_numeric and math.isnan(to_number(rule.value)):
        raise InvalidRuleError(
            f"Operator '{operator.value}' requires a numeric value, got {rule.value!r}"
        )

    if rule.id is not None and rule.id in (rule.prev_id, rule.next_id):
        raise InvalidRuleError("A rule cannot be linked to itself")
    if rule.prev_id is not None and rule.prev_id == rule.next_id:
        raise InvalidRuleError("A rule cannot have the same previous and next rule")


__all__ = ["ensure_valid_rule", "normalize_value", "parse_operator"]
