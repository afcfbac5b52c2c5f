"""Use case for retrieving a single categorization rule."""

from sqlalchemy.orm import Session

from rulechain.domain.entities import Rule
from rulechain.domain.errors import RuleNotFoundError
from rulechain.infrastructure.repositories import RuleRepository


def get_rule(session: Session, rule_id: int) -> Rule:
    """Return the active rule identified by ``rule_id`` or raise an error."""

    rule = RuleRepository(session).get(rule_id)
    if rule is None:
        raise RuleNotFoundError(rule_id)
    return rule
