"""Inspiration wall schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class QuoteCreate(BaseModel):
    """Add a quote to the wall."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int | None = Field(None, alias="userId")
    text: str | None = Field(None, max_length=2000)
    author: str | None = Field(None, max_length=255)
    color: str | None = Field(None, max_length=20)


class WallItemResponse(BaseModel):
    """Wall item response. Quotes have null ``file_path`` and ``mime``."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    kind: str
    text: str | None
    author: str | None
    color: str | None
    file_path: str | None
    mime: str | None
    created_at: datetime
