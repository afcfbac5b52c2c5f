"""SQLAlchemy model for categorizable entries."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from rulechain.infrastructure.database import Base
from rulechain.utils import storage_now

_fields_json_type = JSON().with_variant(JSONB(), "postgresql")


class EntryModel(Base):
    """Database representation of an entry.

    Entries are written by the ingestion side; rules only ever touch
    ``category_id`` and ``updated_at``.
    """

    __tablename__ = "entry"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(String(64), nullable=True, index=True)
    fields = Column(_fields_json_type, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False, default=storage_now)
    updated_at = Column(DateTime(timezone=True), nullable=True)


__all__ = ["EntryModel"]
