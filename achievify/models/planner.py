"""Weekly planner model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func

from achievify.database import Base


class PlannerWeek(Base):
    """A 3x3 planner grid for one user and one week, stored as JSON text."""

    __tablename__ = "planner_weeks"
    __table_args__ = (UniqueConstraint("user_id", "week_key", name="uq_planner_user_week"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    week_key = Column(String(32), nullable=False)  # e.g. "2025-W07"
    data_json = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
