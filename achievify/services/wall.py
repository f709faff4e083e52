"""Inspiration wall service."""

from typing import Any

from fastapi import UploadFile
from sqlalchemy.orm import Query

from achievify.models.enums import WallKind
from achievify.models.wall import WallItem
from achievify.services.owned import OwnedResourceService, optional_text, require

WALL_IMAGE_MIME_TYPES = frozenset({"image/png", "image/jpeg", "image/webp"})


class WallService(OwnedResourceService[WallItem]):
    """Quotes and images pinned to a user's wall."""

    model = WallItem
    blob_subdir = "wall"
    allowed_mime_types = WALL_IMAGE_MIME_TYPES
    unsupported_media_message = "Only PNG/JPEG/WEBP images allowed"

    def apply_filters(self, query: Query, kind: str | None = None, **_: Any) -> Query:
        kind = (kind or "").strip()
        if kind in (WallKind.QUOTE.value, WallKind.IMAGE.value):
            query = query.filter(WallItem.kind == kind)
        return query

    def list_items(self, user_id: int | None, kind: str | None = None) -> list[WallItem]:
        require("userId required", user_id)
        return self.list_owned(user_id, kind=kind)

    def add_quote(
        self,
        user_id: int | None,
        text: str | None,
        author: str | None = None,
        color: str | None = None,
    ) -> WallItem:
        require("userId and text required", user_id, text)
        return self.create(
            user_id,
            kind=WallKind.QUOTE.value,
            text=text.strip(),
            author=optional_text(author),
            color=optional_text(color),
        )

    def add_image(self, user_id: int | None, caption: str | None, file: UploadFile | None) -> WallItem:
        require("userId and image file required", user_id, file)
        return self.upload_and_create(
            user_id,
            file,
            kind=WallKind.IMAGE.value,
            text=optional_text(caption),
        )

    def remove(self, item_id: int, user_id: int | None) -> None:
        require("id and userId required", item_id, user_id)
        self.delete(item_id, user_id)
