"""Use case for listing categorization rules in evaluation order."""

from sqlalchemy.orm import Session

from rulechain.domain.entities import Rule
from rulechain.infrastructure.repositories import RuleRepository
from .chain import order_chain


def list_rules(session: Session) -> list[Rule]:
    """Return the active rules from head to tail."""

    return order_chain(RuleRepository(session).list_active())
