"""ORM models used by the application infrastructure."""

from .entry import EntryModel
from .rule import RuleModel

__all__ = ["EntryModel", "RuleModel"]
