"""Use case for updating categorization rules."""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from rulechain.domain.entities import Rule
from rulechain.domain.errors import InvalidRuleError, RuleNotFoundError
from rulechain.infrastructure.repositories import RuleRepository
from rulechain.utils import storage_now
from .chain import relink
from .validators import ensure_valid_rule, normalize_value, parse_operator

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {"category_id", "property", "operator", "value", "prev_id", "next_id"}
)


def update_rule(session: Session, *, rule_id: int, changes: Mapping[str, Any]) -> Rule:
    """Update a rule's content and/or its position in the chain.

    ``changes`` may hold any subset of :data:`UPDATABLE_FIELDS`; omitted fields
    keep their current value. Moving a rule is expressed by its new
    ``prev_id`` and ``next_id``, always given together. The new neighbours
    are pointed at the rule and the rules it used to sit between are
    stitched together.
    """

    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise InvalidRuleError(f"Unknown rule fields: {', '.join(sorted(unknown))}")
    if ("prev_id" in changes) != ("next_id" in changes):
        raise InvalidRuleError("Moving a rule requires both its previous and next rule")

    repository = RuleRepository(session)
    current = repository.get(rule_id)
    if current is None:
        raise RuleNotFoundError(rule_id)

    values = dict(changes)
    if "operator" in values:
        values["operator"] = parse_operator(values["operator"])
    if "value" in values:
        values["value"] = normalize_value(values["value"])
    updated = replace(current, **values, updated_at=storage_now())
    ensure_valid_rule(updated)

    next_rule = _load_neighbour(repository, updated.next_id, rule_id)
    prev_rule = _load_neighbour(repository, updated.prev_id, rule_id)

    result = repository.update(updated)

    relink(repository, next_rule, "prev_id", rule_id)
    relink(repository, prev_rule, "next_id", rule_id)

    # Re-read the old neighbours: the writes above may have touched them.
    if current.next_id != updated.next_id:
        relink(repository, repository.get(current.next_id), "prev_id", current.prev_id)
    if current.prev_id != updated.prev_id:
        relink(repository, repository.get(current.prev_id), "next_id", current.next_id)

    logger.info("Updated rule %s", rule_id)
    return result


def _load_neighbour(
    repository: RuleRepository, neighbour_id: int | None, rule_id: int
) -> Rule | None:
    if neighbour_id is None:
        return None
    neighbour = repository.get(neighbour_id)
    if neighbour is None:
        logger.warning(
            "Rule %s references missing rule %s; skipping relink", rule_id, neighbour_id
        )
    return neighbour
