"""
Error Taxonomy

Domain exceptions raised by the store, managers and routes. Each carries the
HTTP status it maps to; the handlers in ``main`` turn them into
``{"message": ...}`` responses.
"""


class RecordsError(Exception):
    """Base class for expected, user-facing failures"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(RecordsError):
    status_code = 400
    default_message = "Invalid input"


class AuthRequiredError(RecordsError):
    status_code = 401
    default_message = "Authentication required"


class ForbiddenError(RecordsError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(RecordsError):
    status_code = 404
    default_message = "Not found"


class ConflictError(RecordsError):
    status_code = 409
    default_message = "Conflict"
