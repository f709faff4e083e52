"""Enums for model fields."""

from enum import Enum


class WallKind(str, Enum):
    """Kinds of wall items."""

    QUOTE = "quote"
    IMAGE = "image"
