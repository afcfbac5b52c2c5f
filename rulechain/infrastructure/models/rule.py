"""SQLAlchemy model for categorization rules."""

from sqlalchemy import Column, DateTime, Integer, String

from rulechain.infrastructure.database import Base
from rulechain.utils import storage_now


class RuleModel(Base):
    """Database representation of a rule and its chain links."""

    __tablename__ = "rule"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(String(64), nullable=False)
    property = Column(String(255), nullable=False)
    operator = Column(String(32), nullable=False)
    value = Column(String(1024), nullable=False, default="")
    prev_id = Column(Integer, nullable=True, index=True)
    next_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=storage_now)
    updated_at = Column(DateTime(timezone=True), nullable=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)


__all__ = ["RuleModel"]
