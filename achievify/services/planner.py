"""Weekly planner service."""

import json
import logging
from typing import Any

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from achievify.exceptions import ValidationError
from achievify.models.planner import PlannerWeek
from achievify.services.owned import require

logger = logging.getLogger(__name__)

GRID_SIZE = 3
DEFAULT_CELL = {"text": "", "color": "#ffffff"}

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def default_grid() -> list[list[dict[str, str]]]:
    """A fresh empty 3x3 grid. Never shared between callers."""
    return [[dict(DEFAULT_CELL) for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


def is_valid_grid(data: Any) -> bool:
    """True when ``data`` is exactly 3 rows of 3 cells."""
    return (
        isinstance(data, list)
        and len(data) == GRID_SIZE
        and all(isinstance(row, list) and len(row) == GRID_SIZE for row in data)
    )


class PlannerService:
    """Loads and saves one planner grid per (user, week)."""

    def __init__(self, db: Session):
        self.db = db

    def load(self, user_id: int | None, week: str | None) -> dict[str, Any]:
        """Return the stored grid for the week, or an unsaved default grid."""
        require("userId and week required", user_id, week)
        week_key = week.strip()

        row = (
            self.db.query(PlannerWeek)
            .filter(PlannerWeek.user_id == user_id, PlannerWeek.week_key == week_key)
            .first()
        )
        if row is None:
            return {"week": week_key, "data": default_grid(), "updated_at": None}
        return {"week": week_key, "data": json.loads(row.data_json), "updated_at": row.updated_at}

    def save(self, user_id: int | None, week: str | None, data: Any) -> dict[str, Any]:
        """Replace the week's grid wholesale (upsert on user and week)."""
        require("userId, week, and 3x3 data required", user_id, week)
        if not is_valid_grid(data):
            raise ValidationError("userId, week, and 3x3 data required")
        week_key = week.strip()

        dialect = self.db.get_bind().dialect.name
        try:
            insert = _DIALECT_INSERTS[dialect]
        except KeyError:
            raise RuntimeError(f"Planner upsert is not supported on {dialect}") from None

        stmt = insert(PlannerWeek).values(
            user_id=user_id,
            week_key=week_key,
            data_json=json.dumps(data),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[PlannerWeek.user_id, PlannerWeek.week_key],
            set_={"data_json": stmt.excluded.data_json, "updated_at": func.now()},
        )
        self.db.execute(stmt)
        self.db.commit()
        logger.info(f"Saved planner week {week_key} for user {user_id}")

        return self.load(user_id, week_key)
