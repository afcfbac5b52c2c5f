"""Domain entity representing a categorizable entry."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Entry:
    """An externally owned record whose category rules may reassign."""

    id: int | None
    category_id: str | None
    fields: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value a rule ``property`` refers to."""

        if name in self.fields:
            return self.fields[name]
        attribute = _ATTRIBUTE_ALIASES.get(name)
        if attribute is not None:
            return getattr(self, attribute)
        return default


# Entry attributes a rule may inspect, under both their API and Python names.
_ATTRIBUTE_ALIASES = {
    "id": "id",
    "category_id": "category_id",
    "categoryId": "category_id",
}


__all__ = ["Entry"]
