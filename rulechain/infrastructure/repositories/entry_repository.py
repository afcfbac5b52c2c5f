"""Persistence layer for entries."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from datetime import datetime

from sqlalchemy import update
from sqlalchemy.orm import Session

from rulechain.domain.entities import Entry
from rulechain.infrastructure.models import EntryModel
from rulechain.utils import ensure_app_naive_datetime


class EntryRepository:
    """Read entries and rewrite their category in bulk."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, entry_ids: Collection[int] | None = None) -> Sequence[Entry]:
        """Return entries ordered by id, restricted to ``entry_ids`` when given."""

        query = self.session.query(EntryModel)
        if entry_ids is not None:
            if not entry_ids:
                return []
            query = query.filter(EntryModel.id.in_(list(entry_ids)))
        query = query.order_by(EntryModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, entry_id: int) -> Entry | None:
        model = self.session.get(EntryModel, entry_id)
        return self._to_entity(model) if model else None

    def update_category(
        self, entry_ids: Collection[int], category_id: str, *, updated_at: datetime
    ) -> int:
        """Set ``category_id`` on every entry in ``entry_ids`` with one statement."""

        if not entry_ids:
            return 0
        statement = (
            update(EntryModel)
            .where(EntryModel.id.in_(list(entry_ids)))
            .values(
                category_id=category_id,
                updated_at=ensure_app_naive_datetime(updated_at),
            )
            .execution_options(synchronize_session="fetch")
        )
        result = self.session.execute(statement)
        self.session.commit()
        return result.rowcount

    @staticmethod
    def _to_entity(model: EntryModel) -> Entry:
        return Entry(
            id=model.id,
            category_id=model.category_id,
            fields=dict(model.fields or {}),
            created_at=ensure_app_naive_datetime(model.created_at),
            updated_at=ensure_app_naive_datetime(model.updated_at),
        )


__all__ = ["EntryRepository"]
