"""Use case for recategorizing entries with the ordered rule chain."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

from sqlalchemy.orm import Session

from rulechain.domain.entities import Entry, Rule
from rulechain.infrastructure.repositories import EntryRepository
from rulechain.utils import storage_now
from .list_rules import list_rules

logger = logging.getLogger(__name__)

Changes = dict[str, list[int]]


class CategoryWriter(Protocol):
    def update_category(self, entry_ids, category_id, *, updated_at) -> int: ...


def first_match(rules: Sequence[Rule], entry: Entry) -> Rule | None:
    """Return the first rule, in chain order, whose condition holds for ``entry``."""

    for rule in rules:
        if rule.matches(entry):
            return rule
    return None


def compute_changes(rules: Sequence[Rule], entries: Iterable[Entry]) -> Changes:
    """Group the ids of entries whose category must change by target category.

    Entries matching no rule, or already holding the winning rule's category,
    are left out.
    """

    changes: Changes = {}
    for entry in entries:
        rule = first_match(rules, entry)
        if rule is None or rule.category_id == entry.category_id:
            continue
        changes.setdefault(rule.category_id, []).append(entry.id)
    return changes


def commit_changes(writer: CategoryWriter, changes: Mapping[str, Sequence[int]]) -> int:
    """Write each category group with a single bulk update."""

    updated = 0
    for category_id, entry_ids in changes.items():
        logger.info("%d entries changing to category %s", len(entry_ids), category_id)
        updated += writer.update_category(entry_ids, category_id, updated_at=storage_now())
    return updated


def apply_rules(session: Session, entries: Iterable[Entry] | None = None) -> Changes:
    """Recategorize ``entries`` (every stored entry when omitted).

    Returns the applied changes as ``{category_id: [entry_id, ...]}``.
    """

    rules = list_rules(session)
    repository = EntryRepository(session)
    if entries is None:
        entries = repository.list()

    changes = compute_changes(rules, entries)
    if not changes:
        logger.info("No entry categories changed")
        return changes

    commit_changes(repository, changes)
    return changes
