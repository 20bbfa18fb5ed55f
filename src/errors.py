"""Application errors mapped to HTTP responses by the handlers in src.main."""

from fastapi import status


class BlogError(Exception):
    """Base class for errors that are reported to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(BlogError):
    """Missing or malformed request fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class InvalidCredentialsError(BlogError):
    """Unknown email or wrong password on login."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid email or password"


class ConflictError(BlogError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class UnauthenticatedError(BlogError):
    """No credential was supplied with the request."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidTokenError(BlogError):
    """Bad signature, malformed payload or expired token."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token"


class ForbiddenError(BlogError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied"


class NotFoundError(BlogError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
