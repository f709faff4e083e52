"""SQLAlchemy models."""

from achievify.models.planner import PlannerWeek
from achievify.models.timetable import Timetable
from achievify.models.todo import Todo
from achievify.models.user import User
from achievify.models.wall import WallItem

__all__ = [
    "User",
    "Todo",
    "Timetable",
    "PlannerWeek",
    "WallItem",
]
