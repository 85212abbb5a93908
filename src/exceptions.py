"""Error taxonomy for authentication operations.

Every error carries a human-readable message and the HTTP status the API
renders it with. Lookup failures stay deliberately vague so callers cannot
tell a wrong token from an expired one.
"""

from fastapi import status


class AuthError(Exception):
    """Base class for errors reported to the client in the response envelope."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AuthError):
    """Missing or malformed input, including weak passwords."""


class NotFoundOrExpiredError(AuthError):
    """No user matches the email, or the supplied token is not live."""


class ConflictError(AuthError):
    """The email is already registered."""


class InternalError(AuthError):
    """Persistence, hashing or transport failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UnauthorizedError(AuthError):
    """Missing, tampered or expired session credential."""

    status_code = status.HTTP_401_UNAUTHORIZED
