"""Application error taxonomy. Each error maps to one HTTP status and a user-facing message."""


class AppError(Exception):
    """Base error rendered as {"message": ...} with status_code."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input; raised before any persistent side effect."""

    status_code = 400
    default_message = "Invalid request"


class RejectedUpload(ValidationError):
    """Uploaded file has a disallowed media type or exceeds the size ceiling."""

    default_message = "Only image files are allowed"


class NoChange(AppError):
    """Guarded update matched no row (e.g. a concurrent soft delete won)."""

    status_code = 400
    default_message = "No change"


class Unauthenticated(AppError):
    """Missing, malformed, invalid, expired or revoked bearer token."""

    status_code = 401
    default_message = "Invalid token"


class InvalidCredential(Unauthenticated):
    """Password does not match the stored hash."""

    default_message = "Invalid password"


class Forbidden(AppError):
    """Authenticated principal lacks the required role."""

    status_code = 403
    default_message = "Forbidden"


class NotFound(AppError):
    """Row is missing or soft-deleted."""

    status_code = 404
    default_message = "Not found"


class InternalFailure(AppError):
    """Database or filesystem fault not otherwise classified."""

    status_code = 500
    default_message = "Server error"
