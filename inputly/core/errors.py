"""Domain errors raised by services and auth dependencies.

Each error carries the HTTP status the API layer should answer with. Anything
that is not an AppError is treated as an internal error by the exception
handlers in inputly.main.
"""


class AppError(Exception):
    """Base for errors with a client-safe message and a status hint."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(AppError):
    """Malformed or missing input that passed schema validation."""

    status_code = 400
    default_message = "Validation failed"


class DuplicateAccount(AppError):
    status_code = 409
    default_message = "User already exists"


class InvalidCredentials(AppError):
    """Unknown email or wrong password; the two cases are never distinguished."""

    status_code = 401
    default_message = "Invalid email or password"


class Unauthenticated(AppError):
    """Missing, invalid or expired token."""

    status_code = 401
    default_message = "Unauthorized"


class TokenInvalid(Unauthenticated):
    default_message = "Invalid or expired token"


class TokenExpired(Unauthenticated):
    default_message = "Invalid or expired token"


class Forbidden(AppError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class InternalError(AppError):
    status_code = 500


class HashingError(InternalError):
    """The password hashing primitive failed or a stored digest is malformed."""
