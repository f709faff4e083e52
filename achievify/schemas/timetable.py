"""Timetable schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TimetableResponse(BaseModel):
    """Timetable response. ``file_path`` is also the public URL path."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    file_path: str
    mime: str
    uploaded_at: datetime
