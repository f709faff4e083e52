"""Todo schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TodoCreate(BaseModel):
    """Create a todo."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int | None = Field(None, alias="userId")
    title: str | None = Field(None, max_length=500)


class TodoUpdate(BaseModel):
    """Partial todo update. Absent fields are left untouched."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int | None = Field(None, alias="userId")
    title: str | None = Field(None, max_length=500)
    done: bool | None = None


class TodoResponse(BaseModel):
    """Todo response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    done: bool
    created_at: datetime
    updated_at: datetime
