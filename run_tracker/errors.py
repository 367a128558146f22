"""Error taxonomy shared by services and the HTTP layer.

Every error carries the HTTP status it maps to; the exception handlers in
``run_tracker.main`` turn them into ``{"success": false, "error": ...}``.
"""


class RunTrackerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RunTrackerError):
    status_code = 400
    default_message = "Invalid request data"


class InvalidCredentials(RunTrackerError):
    status_code = 401
    default_message = "Incorrect email or password"


class MissingToken(RunTrackerError):
    status_code = 401
    default_message = "Access token not provided"


class InvalidToken(RunTrackerError):
    status_code = 403
    default_message = "Invalid or expired token"


class NotFound(RunTrackerError):
    status_code = 404
    default_message = "Not found"


class UploadTooLarge(RunTrackerError):
    status_code = 400
    default_message = "File is too large"


class UnsupportedFileType(RunTrackerError):
    status_code = 400
    default_message = "Only image files are allowed"


class InternalError(RunTrackerError):
    status_code = 500
