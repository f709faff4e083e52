"""Weekly planner schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PlannerCell(BaseModel):
    """One cell of the planner grid."""

    text: str = ""
    color: str = "#ffffff"


class PlannerSave(BaseModel):
    """Save a week's grid. The 3x3 shape is enforced by the service."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int | None = Field(None, alias="userId")
    week: str | None = Field(None, max_length=32)
    data: list[list[PlannerCell]] | None = None


class PlannerResponse(BaseModel):
    """A week's grid. ``updated_at`` is null until the week is first saved."""

    week: str
    data: list[list[PlannerCell]]
    updated_at: datetime | None


class PlannerSaveResponse(PlannerResponse):
    """Save acknowledgement with the stored grid."""

    message: str
