"""Timetable upload model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from achievify.database import Base


class Timetable(Base):
    """An uploaded timetable file. The newest row per user is the current one."""

    __tablename__ = "timetables"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    file_path = Column(String(500), nullable=False)  # "uploads/timetables/<name>"
    mime = Column(String(100), nullable=False)
    uploaded_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
