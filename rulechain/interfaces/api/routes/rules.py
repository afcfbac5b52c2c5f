"""Routes for managing and applying categorization rules."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from rulechain.application.use_cases.rules import (
    apply_rules as apply_rules_uc,
    create_rule as create_rule_uc,
    delete_rule as delete_rule_uc,
    get_rule as get_rule_uc,
    list_rules as list_rules_uc,
    update_rule as update_rule_uc,
)
from rulechain.domain.entities import Rule
from rulechain.domain.errors import InvalidRuleError, RuleChainError, RuleNotFoundError
from rulechain.infrastructure.database import get_db
from rulechain.infrastructure.repositories import EntryRepository
from rulechain.interfaces.api.schemas import (
    ApplyRulesRequest,
    ApplyRulesResponse,
    RuleCreate,
    RuleRead,
    RuleUpdate,
)

router = APIRouter(prefix="/rules", tags=["rules"])


def _to_read_model(rule: Rule) -> RuleRead:
    return RuleRead.model_validate(rule)


def _broken_chain(exc: RuleChainError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.get("/", response_model=list[RuleRead])
def list_rules(db: Session = Depends(get_db)) -> list[RuleRead]:
    """Return the active rules in evaluation order."""

    try:
        rules = list_rules_uc(db)
    except RuleChainError as exc:
        raise _broken_chain(exc) from exc
    return [_to_read_model(rule) for rule in rules]


@router.post("/", response_model=RuleRead, status_code=status.HTTP_201_CREATED)
def register_rule(rule_in: RuleCreate, db: Session = Depends(get_db)) -> RuleRead:
    """Create a rule that is evaluated before every existing one."""

    try:
        rule = create_rule_uc(
            db,
            category_id=rule_in.category_id,
            property=rule_in.property,
            operator=rule_in.operator,
            value=rule_in.value,
        )
    except InvalidRuleError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(rule)


@router.post("/apply", response_model=ApplyRulesResponse)
def apply_rules(
    apply_in: ApplyRulesRequest | None = None,
    db: Session = Depends(get_db),
) -> ApplyRulesResponse:
    """Recategorize the requested entries, or all of them when none are listed."""

    entry_ids = apply_in.entry_ids if apply_in is not None else None
    entries = EntryRepository(db).list(entry_ids) if entry_ids is not None else None
    try:
        changes = apply_rules_uc(db, entries)
    except RuleChainError as exc:
        raise _broken_chain(exc) from exc
    return ApplyRulesResponse(
        changes=changes, updated=sum(len(ids) for ids in changes.values())
    )


@router.get("/{rule_id}", response_model=RuleRead)
def read_rule(rule_id: int, db: Session = Depends(get_db)) -> RuleRead:
    """Return the rule identified by ``rule_id``."""

    try:
        rule = get_rule_uc(db, rule_id)
    except RuleNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(rule)


@router.put("/{rule_id}", response_model=RuleRead)
def update_rule(
    rule_id: int,
    rule_in: RuleUpdate,
    db: Session = Depends(get_db),
) -> RuleRead:
    """Change a rule's content and/or move it within the chain."""

    try:
        rule = update_rule_uc(
            db, rule_id=rule_id, changes=rule_in.model_dump(exclude_unset=True)
        )
    except RuleNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except InvalidRuleError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(rule)


@router.delete("/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rule(rule_id: int, db: Session = Depends(get_db)) -> Response:
    """Soft-delete a rule and close the gap it leaves in the chain."""

    try:
        delete_rule_uc(db, rule_id)
    except RuleNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
