"""Application error taxonomy.

Services raise these instead of building HTTP responses; the handlers in
``naai.api.exception_handlers`` turn them into the ``{"error": ...}`` body
with the status that belongs to each kind.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of an application error."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INFRASTRUCTURE = "infrastructure"
    INTERNAL = "internal"


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, hint: str | None = None):
        self.message = message or self.default_message
        self.hint = hint
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""

    kind = ErrorKind.VALIDATION
    status_code = 400
    default_message = "Invalid request"


class AuthError(AppError):
    """Missing, invalid or expired credentials."""

    kind = ErrorKind.AUTHENTICATION
    status_code = 401
    default_message = "Authentication required"


class MissingTokenError(AuthError):
    """No bearer token on the request."""

    status_code = 401
    default_message = "Access token required"


class InvalidTokenError(AuthError):
    """Bad signature, malformed token or expired token; deliberately not told apart."""

    status_code = 403
    default_message = "Invalid or expired token"


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password; deliberately not told apart."""

    status_code = 401
    default_message = "Invalid email or password"


class AuthorizationError(AppError):
    """Authenticated, but the role or ownership does not allow the action."""

    kind = ErrorKind.AUTHORIZATION
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    """A unique key is already taken."""

    kind = ErrorKind.CONFLICT
    status_code = 400
    default_message = "Already exists"


class InfrastructureError(AppError):
    """The database could not be reached."""

    kind = ErrorKind.INFRASTRUCTURE
    status_code = 500
    default_message = "Database connection failed"
