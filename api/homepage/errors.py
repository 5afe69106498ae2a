"""Error taxonomy shared by the services and the HTTP boundary.

Services raise these; exception handlers in ``homepage.main`` turn them into
``{"message", "code", "request_id"}`` JSON bodies with the matching status.
"""

from fastapi import status


class HomepageError(Exception):
    """Base class for every error the API reports to callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(HomepageError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    default_message = "Invalid input"

    def __init__(self, message: str | None = None, field: str | None = None):
        super().__init__(message)
        self.field = field


class WeakPasswordError(ValidationError):
    """New password does not satisfy the complexity policy."""

    code = "WEAK_PASSWORD"

    def __init__(self, message: str, rule: str):
        super().__init__(message, field="newPassword")
        self.rule = rule


class AuthenticationError(HomepageError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    default_message = "Authentication required"


class InvalidCredentials(AuthenticationError):
    default_message = "Invalid username or password"


class MissingToken(AuthenticationError):
    default_message = "Authentication token required"


class InvalidToken(AuthenticationError):
    default_message = "Invalid authentication token"


class ExpiredSessionError(AuthenticationError):
    code = "SESSION_EXPIRED"
    default_message = "Session has expired, please log in again"


class AuthorizationError(HomepageError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_message = "Admin access required"


class StorageError(HomepageError):
    """Persistence read/write failure. The message never carries internals."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "STORAGE_ERROR"
    default_message = "Failed to access stored data"
