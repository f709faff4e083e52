"""Pydantic schemas for API requests and responses."""

from achievify.schemas.auth import (
    LoginResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from achievify.schemas.planner import PlannerCell, PlannerResponse, PlannerSave, PlannerSaveResponse
from achievify.schemas.timetable import TimetableResponse
from achievify.schemas.todo import TodoCreate, TodoResponse, TodoUpdate
from achievify.schemas.wall import QuoteCreate, WallItemResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "LoginResponse",
    "MessageResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
    "TimetableResponse",
    "PlannerCell",
    "PlannerSave",
    "PlannerResponse",
    "PlannerSaveResponse",
    "QuoteCreate",
    "WallItemResponse",
]
