"""Schemas for categorization rule endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from rulechain.domain.operators import RuleOperator

RuleValue = str | int | float


class RuleBase(BaseModel):
    category_id: str = Field(..., alias="categoryId", min_length=1)
    property: str = Field(..., min_length=1)
    operator: RuleOperator
    value: RuleValue

    model_config = ConfigDict(populate_by_name=True)


class RuleCreate(RuleBase):
    """Payload required to create a rule at the head of the chain."""


class RuleUpdate(BaseModel):
    """Partial update; ``prev``/``next`` set to ``null`` mark a chain end."""

    category_id: str | None = Field(default=None, alias="categoryId", min_length=1)
    property: str | None = Field(default=None, min_length=1)
    operator: RuleOperator | None = None
    value: RuleValue | None = None
    prev_id: int | None = Field(default=None, alias="prev")
    next_id: int | None = Field(default=None, alias="next")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class RuleRead(RuleBase):
    id: int
    value: str
    prev_id: int | None = Field(..., alias="prev")
    next_id: int | None = Field(..., alias="next")
    created_at: datetime | None = Field(..., alias="createdTime")
    updated_at: datetime | None = Field(..., alias="updatedTime")
    deleted_at: datetime | None = Field(..., alias="deletedTime")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
