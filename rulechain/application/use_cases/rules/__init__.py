"""Use cases for managing and applying categorization rules."""

from .apply_rules import apply_rules, commit_changes, compute_changes, first_match
from .create_rule import create_rule
from .delete_rule import delete_rule
from .get_rule import get_rule
from .list_rules import list_rules
from .update_rule import update_rule

__all__ = [
    "apply_rules",
    "commit_changes",
    "compute_changes",
    "create_rule",
    "delete_rule",
    "first_match",
    "get_rule",
    "list_rules",
    "update_rule",
]
