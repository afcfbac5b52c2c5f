"""Helpers that keep the active rules linked as a single chain."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Literal

from rulechain.domain.entities import Rule
from rulechain.domain.errors import RuleChainError
from rulechain.infrastructure.repositories import RuleRepository
from rulechain.utils import storage_now

logger = logging.getLogger(__name__)

LinkField = Literal["prev_id", "next_id"]


def order_chain(rules: Sequence[Rule]) -> list[Rule]:
    """Return ``rules`` ordered head to tail by following ``next_id``.

    Raises :class:`RuleChainError` unless the rules form exactly one chain
    covering all of them.
    """

    if not rules:
        return []

    rules_by_id = {rule.id: rule for rule in rules}
    heads = [rule for rule in rules if rule.prev_id is None]
    if len(heads) != 1:
        raise _chain_error(f"expected one head rule, found {len(heads)}")

    ordered = [heads[0]]
    seen = {heads[0].id}
    while ordered[-1].next_id is not None:
        current = ordered[-1]
        following = rules_by_id.get(current.next_id)
        if following is None:
            raise _chain_error(
                f"rule {current.id} links to missing rule {current.next_id}"
            )
        if following.id in seen:
            raise _chain_error(f"rule {following.id} is linked twice")
        if following.prev_id != current.id:
            raise _chain_error(
                f"rule {following.id} points back to {following.prev_id}, not {current.id}"
            )
        ordered.append(following)
        seen.add(following.id)

    if len(ordered) != len(rules):
        raise _chain_error(
            f"chain reaches {len(ordered)} of {len(rules)} active rules"
        )
    return ordered


def relink(
    repository: RuleRepository,
    neighbour: Rule | None,
    field: LinkField,
    target_id: int | None,
) -> Rule | None:
    """Point ``neighbour.<field>`` at ``target_id``, writing only on change.

    A missing neighbour leaves that side of the chain untouched.
    """

    if neighbour is None or getattr(neighbour, field) == target_id:
        return neighbour
    logger.debug("Relinking rule %s: %s -> %s", neighbour.id, field, target_id)
    return repository.update(
        replace(neighbour, **{field: target_id, "updated_at": storage_now()})
    )


def _chain_error(detail: str) -> RuleChainError:
    logger.error("Rule chain is inconsistent: %s", detail)
    return RuleChainError(f"Rule chain is inconsistent: {detail}")


__all__ = ["LinkField", "order_chain", "relink"]
