"""Aggregate application use cases."""

from .rules import apply_rules, create_rule, delete_rule, get_rule, list_rules, update_rule

__all__ = [
    "apply_rules",
    "create_rule",
    "delete_rule",
    "get_rule",
    "list_rules",
    "update_rule",
]
