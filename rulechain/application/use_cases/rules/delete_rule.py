"""Use case for deleting categorization rules."""

import logging

from sqlalchemy.orm import Session

from rulechain.domain.errors import RuleNotFoundError
from rulechain.infrastructure.repositories import RuleRepository
from .chain import relink

logger = logging.getLogger(__name__)


def delete_rule(session: Session, rule_id: int) -> None:
    """Soft-delete the rule and join its former neighbours to each other."""

    repository = RuleRepository(session)
    rule = repository.get(rule_id)
    if rule is None:
        raise RuleNotFoundError(rule_id)

    next_rule = repository.get(rule.next_id)
    prev_rule = repository.get(rule.prev_id)

    repository.soft_delete(rule_id)

    relink(repository, next_rule, "prev_id", prev_rule.id if prev_rule else None)
    relink(repository, prev_rule, "next_id", next_rule.id if next_rule else None)

    logger.info("Deleted rule %s", rule_id)
