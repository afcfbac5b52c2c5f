"""Repository implementations for infrastructure layer."""

from .entry_repository import EntryRepository
from .rule_repository import RuleRepository

__all__ = ["EntryRepository", "RuleRepository"]
