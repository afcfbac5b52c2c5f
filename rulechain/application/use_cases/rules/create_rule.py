"""Use case for creating categorization rules."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from rulechain.domain.entities import Rule
from rulechain.infrastructure.repositories import RuleRepository
from rulechain.utils import storage_now
from .chain import relink
from .validators import ensure_valid_rule, normalize_value, parse_operator

logger = logging.getLogger(__name__)


def create_rule(
    session: Session,
    *,
    category_id: str,
    property: str,
    operator: str,
    value: Any,
) -> Rule:
    """Create a rule at the head of the chain, ahead of every existing rule."""

    repository = RuleRepository(session)
    entity = Rule(
        id=None,
        category_id=category_id,
        property=property,
        operator=parse_operator(operator),
        value=normalize_value(value),
        prev_id=None,
        next_id=None,
        created_at=None,
        updated_at=None,
        deleted_at=None,
    )
    ensure_valid_rule(entity)

    head = repository.get_head()
    entity.next_id = head.id if head else None
    entity.created_at = storage_now()
    created = repository.create(entity)

    relink(repository, head, "prev_id", created.id)

    logger.info(
        "Created rule %s (%s %s %r -> %s) ahead of %s",
        created.id,
        created.property,
        created.operator.value,
        created.value,
        created.category_id,
        head.id if head else "nothing",
    )
    return created
