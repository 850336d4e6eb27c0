"""Domain-specific exceptions: framework-independent.

Every failure that can reach a client is a ``TrackmasterError`` carrying the
HTTP-equivalent status code it should be answered with.
"""


class TrackmasterError(Exception):
    """Base class for failures that are translated into a client response."""

    status_code: int = 500
    default_message: str = "An unknown error occurred."

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(TrackmasterError):
    """Raised when request input is missing or malformed."""

    status_code = 422
    default_message = "Invalid inputs passed, please check your data."


class AuthError(TrackmasterError):
    """Raised for missing/invalid tokens (401) or rejected credentials (403)."""

    status_code = 401
    default_message = "Authentication failed!"


class NotFoundError(TrackmasterError):
    """Raised when a requested entity does not exist."""

    status_code = 404

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"Could not find {entity_type} for id '{entity_id}'.")


class ConflictError(TrackmasterError):
    """Raised when a unique field is already taken."""

    status_code = 422

    def __init__(self, entity_type: str, field: str, message: str):
        self.entity_type = entity_type
        self.field = field
        super().__init__(message)


class InternalError(TrackmasterError):
    """Raised when persistence or an upstream service fails."""

    status_code = 500
    default_message = "Something went wrong, please try again later."


class PersistenceError(Exception):
    """Raised by repositories when the database rejects an operation."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {type(cause).__name__}")


class LookupServiceError(Exception):
    """Raised when an external lookup service fails.

    Provider-agnostic: used by the device detector and the IP geolocator.
    """

    def __init__(self, service: str, status_code: int, message: str):
        self.service = service
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{service}] {status_code}: {message}")
