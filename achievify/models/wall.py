"""Inspiration wall model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text

from achievify.database import Base
from achievify.models.mixins import CreatedAtMixin


class WallItem(Base, CreatedAtMixin):
    """A quote or an uploaded image pinned to a user's wall.

    Quotes never carry a file; images always carry ``file_path`` and ``mime``.
    """

    __tablename__ = "wall_items"
    __table_args__ = (
        CheckConstraint(
            "(kind = 'quote' AND file_path IS NULL) OR "
            "(kind = 'image' AND file_path IS NOT NULL AND mime IS NOT NULL)",
            name="ck_wall_items_kind_file",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    kind = Column(String(10), nullable=False, index=True)  # WallKind value
    text = Column(Text, nullable=True)  # Quote text or image caption
    author = Column(String(255), nullable=True)
    color = Column(String(20), nullable=True)
    file_path = Column(String(500), nullable=True)
    mime = Column(String(100), nullable=True)
