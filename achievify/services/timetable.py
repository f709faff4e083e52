"""Timetable upload service."""

from fastapi import UploadFile

from achievify.models.timetable import Timetable
from achievify.services.owned import OwnedResourceService, require

TIMETABLE_MIME_TYPES = frozenset({"image/png", "image/jpeg", "image/webp", "application/pdf"})


class TimetableService(OwnedResourceService[Timetable]):
    """Uploaded timetables. The most recent upload is the user's current timetable."""

    model = Timetable
    created_column = "uploaded_at"
    blob_subdir = "timetables"
    allowed_mime_types = TIMETABLE_MIME_TYPES
    unsupported_media_message = "Only PNG/JPEG/WEBP or PDF allowed"

    def current(self, user_id: int | None) -> Timetable | None:
        require("userId required", user_id)
        return self.latest(user_id)

    def upload(self, user_id: int | None, title: str | None, file: UploadFile | None) -> Timetable:
        require("userId, title, file required", user_id, title, file)
        return self.upload_and_create(user_id, file, title=title.strip())

    def remove(self, timetable_id: int, user_id: int | None) -> None:
        require("id and userId required", timetable_id, user_id)
        self.delete(timetable_id, user_id)
