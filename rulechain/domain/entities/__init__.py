"""Domain entities exposed by the application."""

from .entry import Entry
from .rule import Rule

__all__ = ["Entry", "Rule"]
