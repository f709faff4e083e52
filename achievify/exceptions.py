"""Domain errors raised by services and rendered by the API layer.

Every error carries the HTTP status it maps to and a message that is safe to
show to the caller. Anything that is not an ``AchievifyError`` is treated as
a server error and never echoed back.
"""

from fastapi import status


class AchievifyError(Exception):
    """Base class for errors that become a ``{"message": ...}`` response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None, *, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AchievifyError):
    """Missing or malformed input."""

    default_message = "Invalid request"


class ConflictError(AchievifyError):
    """A uniqueness constraint would be violated."""

    default_message = "Already exists"


class InvalidCredentialsError(AchievifyError):
    """Password did not match the stored digest."""

    default_message = "Invalid password"


class NotFoundError(AchievifyError):
    """Resource is missing or not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UnsupportedMediaError(AchievifyError):
    """Uploaded file was rejected."""

    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    default_message = "Unsupported file type"


class FileTooLargeError(UnsupportedMediaError):
    """Uploaded file exceeds the size ceiling."""

    status_code = status.HTTP_413_CONTENT_TOO_LARGE
    default_message = "File too large"
