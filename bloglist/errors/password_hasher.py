from logging import getLogger

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class PasswordHashingError(BaseAppError):
    """Error raised when the password hasher fails."""

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


password_hashing_exception_handler = create_exception_handler(logger)
