"""Timetable upload API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from achievify.api.dependencies import get_timetable_service
from achievify.schemas.auth import MessageResponse
from achievify.schemas.timetable import TimetableResponse
from achievify.services.timetable import TimetableService

router = APIRouter(prefix="/api/timetable", tags=["timetable"])


@router.get("", response_model=TimetableResponse | None)
def get_timetable(
    service: Annotated[TimetableService, Depends(get_timetable_service)],
    user_id: int | None = Query(default=None, alias="userId"),
):
    """Get the user's latest timetable, or null if none was uploaded."""
    return service.current(user_id)


@router.post("", response_model=TimetableResponse)
def upload_timetable(
    service: Annotated[TimetableService, Depends(get_timetable_service)],
    user_id: Annotated[int | None, Form(alias="userId")] = None,
    title: Annotated[str | None, Form()] = None,
    file: Annotated[UploadFile | None, File(description="PNG, JPEG, WEBP or PDF")] = None,
):
    """Upload a new timetable. It becomes the current one."""
    return service.upload(user_id, title, file)


@router.delete("/{timetable_id}", response_model=MessageResponse)
def delete_timetable(
    timetable_id: int,
    service: Annotated[TimetableService, Depends(get_timetable_service)],
    user_id: int | None = Query(default=None, alias="userId"),
):
    """Delete a timetable and its file."""
    service.remove(timetable_id, user_id)
    return MessageResponse(message="Deleted")
