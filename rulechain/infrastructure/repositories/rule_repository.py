"""Persistence layer for categorization rules."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from rulechain.domain.entities import Rule
from rulechain.domain.operators import RuleOperator
from rulechain.infrastructure.models import RuleModel
from rulechain.utils import ensure_app_naive_datetime, storage_now


class RuleRepository:
    """Find, insert and replace rule records.

    Only rules without ``deleted_at`` are visible to lookups; deleted rules are
    kept for auditing and never reused.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_active(self) -> Sequence[Rule]:
        query = (
            self.session.query(RuleModel)
            .filter(RuleModel.deleted_at.is_(None))
            .order_by(RuleModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, rule_id: int | None) -> Rule | None:
        if rule_id is None:
            return None
        model = self._get_model(id=rule_id)
        return self._to_entity(model) if model else None

    def get_head(self) -> Rule | None:
        """Return the active rule with no predecessor."""

        model = (
            self.session.query(RuleModel)
            .filter(RuleModel.deleted_at.is_(None))
            .filter(RuleModel.prev_id.is_(None))
            .order_by(RuleModel.id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, rule: Rule) -> Rule:
        model = RuleModel()
        self._apply_entity_to_model(model, rule)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, rule: Rule) -> Rule:
        model = self._get_model(id=rule.id)
        if not model:
            msg = f"Rule with id {rule.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, rule)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def soft_delete(self, rule_id: int) -> Rule:
        """Mark the rule deleted and drop it out of the chain."""

        model = self._get_model(id=rule_id)
        if not model:
            msg = f"Rule with id {rule_id} not found"
            raise ValueError(msg)
        model.deleted_at = storage_now()
        model.prev_id = None
        model.next_id = None
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: RuleModel) -> Rule:
        return Rule(
            id=model.id,
            category_id=model.category_id,
            property=model.property,
            operator=RuleOperator(model.operator),
            value=model.value,
            prev_id=model.prev_id,
            next_id=model.next_id,
            created_at=ensure_app_naive_datetime(model.created_at),
            updated_at=ensure_app_naive_datetime(model.updated_at),
            deleted_at=ensure_app_naive_datetime(model.deleted_at),
        )

    def _get_model(self, **filters) -> RuleModel | None:
        query = self.session.query(RuleModel).filter(RuleModel.deleted_at.is_(None))
        return query.filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: RuleModel, rule: Rule) -> None:
        model.category_id = rule.category_id
        model.property = rule.property
        model.operator = RuleOperator(rule.operator).value
        model.value = rule.value
        model.prev_id = rule.prev_id
        model.next_id = rule.next_id
        if rule.created_at is not None:
            model.created_at = ensure_app_naive_datetime(rule.created_at)
        model.updated_at = ensure_app_naive_datetime(rule.updated_at)
        model.deleted_at = ensure_app_naive_datetime(rule.deleted_at)


__all__ = ["RuleRepository"]
