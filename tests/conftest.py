"""Shared fixtures backed by a throwaway SQLite database."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "rulechain_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "UTC"

from rulechain.config import get_settings  # noqa: E402

get_settings.cache_clear()

from rulechain.domain.entities import Entry, Rule  # noqa: E402
from rulechain.domain.operators import RuleOperator  # noqa: E402
from rulechain.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from rulechain.infrastructure.models import EntryModel  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def add_entry():
    """Insert an entry directly, the way the ingestion side would."""

    def _add(category_id: str | None = None, **fields) -> int:
        with SessionLocal() as db:
            model = EntryModel(category_id=category_id, fields=fields)
            db.add(model)
            db.commit()
            db.refresh(model)
            return model.id

    return _add


def make_rule(
    rule_id: int,
    *,
    category_id: str = "cat",
    property: str = "desc",
    operator: RuleOperator | str = RuleOperator.CONTAINS,
    value: str = "",
    prev_id: int | None = None,
    next_id: int | None = None,
) -> Rule:
    return Rule(
        id=rule_id,
        category_id=category_id,
        property=property,
        operator=RuleOperator(operator),
        value=value,
        prev_id=prev_id,
        next_id=next_id,
        created_at=None,
        updated_at=None,
        deleted_at=None,
    )


def make_entry(entry_id: int, category_id: str | None = None, **fields) -> Entry:
    return Entry(id=entry_id, category_id=category_id, fields=fields)
