"""Domain entity representing a categorization rule."""

from dataclasses import dataclass
from datetime import datetime

from rulechain.domain.operators import RuleOperator, evaluate

from .entry import Entry


@dataclass
class Rule:
    """A single link in the ordered rule chain.

    ``prev_id`` and ``next_id`` reference the neighbouring active rules, or
    ``None`` at the head and tail of the chain.
    """

    id: int | None
    category_id: str
    property: str
    operator: RuleOperator
    value: str
    prev_id: int | None
    next_id: int | None
    created_at: datetime | None
    updated_at: datetime | None
    deleted_at: datetime | None

    def matches(self, entry: Entry) -> bool:
        """Return whether this rule's condition holds for ``entry``."""

        return evaluate(self.operator, entry.get(self.property), self.value)


__all__ = ["Rule"]
