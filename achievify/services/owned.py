"""Ownership-checked CRUD shared by every per-user resource.

Each resource service subclasses ``OwnedResourceService`` and only declares
its model, its blob settings and its request-specific validation. The
subclass never re-implements the ownership contract:

- a row that exists but belongs to someone else is reported as not found
- writes and deletes are single conditional statements
  (``WHERE id = ? AND user_id = ?``) checked by affected row count
- every write returns the row as re-read from the database
- uploads write the blob first and insert the row second; deletes remove
  the row first and the blob second, best-effort
"""

from typing import Any, ClassVar, Generic, TypeVar

from fastapi import UploadFile
from sqlalchemy import delete, update
from sqlalchemy.orm import Query, Session

from achievify.exceptions import (
    FileTooLargeError,
    NotFoundError,
    UnsupportedMediaError,
    ValidationError,
)
from achievify.services.storage import BlobStore

ModelT = TypeVar("ModelT")

DEFAULT_MAX_UPLOAD_BYTES = 8 * 1024 * 1024


def require(message: str, *values: Any) -> None:
    """Raise ValidationError unless every value is present and non-blank."""
    for value in values:
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "" or value == 0:
            raise ValidationError(message)


def optional_text(value: str | None) -> str | None:
    """Trim a free-text field, mapping blank input to None."""
    value = (value or "").strip()
    return value or None


class OwnedResourceService(Generic[ModelT]):
    """Generic list/create/update/delete/upload for rows owned by a user."""

    model: ClassVar[type]
    created_column: ClassVar[str] = "created_at"
    not_found_message: ClassVar[str] = "Not found"

    # Upload settings; resources without files leave blob_subdir unset.
    blob_subdir: ClassVar[str | None] = None
    allowed_mime_types: ClassVar[frozenset[str]] = frozenset()
    unsupported_media_message: ClassVar[str] = "Unsupported file type"

    def __init__(
        self,
        db: Session,
        blob_store: BlobStore | None = None,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ):
        self.db = db
        self.blob_store = blob_store
        self.max_upload_bytes = max_upload_bytes

    # --- Queries ---

    def _owned_query(self, user_id: int) -> Query:
        return self.db.query(self.model).filter(self.model.user_id == user_id)

    def _newest_first(self, query: Query) -> Query:
        created = getattr(self.model, self.created_column)
        return query.order_by(created.desc(), self.model.id.desc())

    def apply_filters(self, query: Query, **filters: Any) -> Query:
        """Narrow a listing by resource-specific filters. Unknown values are ignored."""
        return query

    def list_owned(self, user_id: int, **filters: Any) -> list[ModelT]:
        """All rows owned by ``user_id``, newest first."""
        query = self.apply_filters(self._owned_query(user_id), **filters)
        return self._newest_first(query).all()

    def latest(self, user_id: int) -> ModelT | None:
        """The newest row owned by ``user_id``, if any."""
        return self._newest_first(self._owned_query(user_id)).first()

    def get_owned(self, item_id: int, user_id: int) -> ModelT:
        """Fetch a row by id, treating rows owned by other users as missing."""
        item = self._owned_query(user_id).filter(self.model.id == item_id).first()
        if item is None:
            raise NotFoundError(self.not_found_message)
        return item

    # --- Mutations ---

    def create(self, user_id: int, **values: Any) -> ModelT:
        """Insert a row for ``user_id`` and return it with server-computed fields."""
        item = self.model(user_id=user_id, **values)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def update(self, item_id: int, user_id: int, changes: dict[str, Any]) -> ModelT:
        """Apply ``changes`` to an owned row and return the re-read row."""
        if not changes:
            # Not-found takes precedence over an empty change set.
            self.get_owned(item_id, user_id)
            raise ValidationError("Nothing to update")

        result = self.db.execute(
            update(self.model)
            .where(self.model.id == item_id, self.model.user_id == user_id)
            .values(**changes)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError(self.not_found_message)
        self.db.commit()
        return self.get_owned(item_id, user_id)

    def delete(self, item_id: int, user_id: int) -> None:
        """Delete an owned row, then best-effort delete its blob."""
        item = self.get_owned(item_id, user_id)
        file_path = getattr(item, "file_path", None)

        result = self.db.execute(
            delete(self.model)
            .where(self.model.id == item_id, self.model.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError(self.not_found_message)
        self.db.commit()

        # The row is the source of truth; a leftover file is only logged.
        if file_path and self.blob_store is not None:
            self.blob_store.delete(file_path)

    def upload_and_create(self, user_id: int, upload: UploadFile, **values: Any) -> ModelT:
        """Validate and store an uploaded file, then insert a row referencing it."""
        if self.blob_store is None or self.blob_subdir is None:
            raise RuntimeError(f"{type(self).__name__} is not configured for uploads")

        content_type = upload.content_type or ""
        if content_type not in self.allowed_mime_types:
            raise UnsupportedMediaError(self.unsupported_media_message)

        data = upload.file.read(self.max_upload_bytes + 1)
        if len(data) > self.max_upload_bytes:
            max_mb = self.max_upload_bytes // (1024 * 1024)
            raise FileTooLargeError(f"File too large. Maximum size is {max_mb}MB.")

        file_path = self.blob_store.save(self.blob_subdir, upload.filename, data)
        # No rollback of the blob if the insert fails: an orphaned file is tolerated.
        return self.create(user_id, file_path=file_path, mime=content_type, **values)
