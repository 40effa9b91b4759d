"""Error kinds returned by the API and the storage layer."""


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request."


class Unauthenticated(AppError):
    status_code = 401
    default_message = "Authentication required."


class Forbidden(AppError):
    status_code = 403
    default_message = "You do not have permission to perform this action."


class NotFound(AppError):
    status_code = 404
    default_message = "Not found."


class Conflict(AppError):
    status_code = 409
    default_message = "Resource already exists."


class InternalError(AppError):
    status_code = 500


class DuplicateRecordError(Exception):
    """Raised by the storage layer when a unique constraint rejects a write."""
