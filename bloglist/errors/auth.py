"""Authentication and authorization errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class AuthorizationError(BaseAppError):
    """Base class for authentication and authorization errors."""

    def __init__(
        self,
        detail: str = "Authorization failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class TokenMissingError(AuthorizationError):
    """Raised when a request needs a bearer token and carries none."""

    def __init__(self) -> None:
        super().__init__("token missing or invalid")


class InvalidTokenError(AuthorizationError):
    """Raised when a token fails signature or expiry checks or names no user."""

    def __init__(self, detail: str = "token invalid or expired") -> None:
        super().__init__(detail)


class InvalidCredentialsError(AuthorizationError):
    """Raised when login credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("invalid username or password")


class NotOwnerError(AuthorizationError):
    """Raised when a caller tries to delete a blog they do not own."""

    def __init__(self) -> None:
        super().__init__("only the creator can delete a blog")


auth_exception_handler = create_exception_handler(logger)
