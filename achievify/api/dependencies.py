"""FastAPI dependencies for services, storage and the database."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from achievify.config import get_settings
from achievify.database import get_db
from achievify.services.auth import AuthService
from achievify.services.planner import PlannerService
from achievify.services.storage import BlobStore
from achievify.services.timetable import TimetableService
from achievify.services.todos import TodoService
from achievify.services.wall import WallService

UPLOAD_SUBDIRS = (TimetableService.blob_subdir, WallService.blob_subdir)


@lru_cache
def get_blob_store() -> BlobStore:
    """Get the process-wide blob store rooted at the configured upload directory."""
    return BlobStore(get_settings().upload_root, subdirs=UPLOAD_SUBDIRS)


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db)


def get_todo_service(
    db: Annotated[Session, Depends(get_db)],
) -> TodoService:
    """Get todo service with dependencies."""
    return TodoService(db)


def get_timetable_service(
    db: Annotated[Session, Depends(get_db)],
    blob_store: Annotated[BlobStore, Depends(get_blob_store)],
) -> TimetableService:
    """Get timetable service with dependencies."""
    return TimetableService(db, blob_store, get_settings().max_upload_bytes)


def get_planner_service(
    db: Annotated[Session, Depends(get_db)],
) -> PlannerService:
    """Get planner service with dependencies."""
    return PlannerService(db)


def get_wall_service(
    db: Annotated[Session, Depends(get_db)],
    blob_store: Annotated[BlobStore, Depends(get_blob_store)],
) -> WallService:
    """Get wall service with dependencies."""
    return WallService(db, blob_store, get_settings().max_upload_bytes)
