"""Todo model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, false

from achievify.database import Base
from achievify.models.mixins import TimestampMixin


class Todo(Base, TimestampMixin):
    """A single todo entry owned by a user."""

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    done = Column(Boolean, nullable=False, default=False, server_default=false())
