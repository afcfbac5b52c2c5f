"""Schemas for applying rules to entries."""

from pydantic import BaseModel, ConfigDict, Field


class ApplyRulesRequest(BaseModel):
    entry_ids: list[int] | None = Field(default=None, alias="entryIds")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ApplyRulesResponse(BaseModel):
    """Entry ids moved to each category, plus the total number moved."""

    changes: dict[str, list[int]]
    updated: int
