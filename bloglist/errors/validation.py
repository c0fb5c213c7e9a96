"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.utils.helpers import host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Raised when request data breaks a rule the schemas do not express."""

    def __init__(self, detail: str = "Validation Error") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


def _format_error(error: dict[str, Any]) -> dict[str, Any]:
    loc = error.get("loc", ())
    # Skip the 'body' / 'path' / 'query' prefix
    formatted_error: dict[str, Any] = {
        "field": ".".join(str(part) for part in loc[1:]) or ".".join(str(part) for part in loc),
        "message": error.get("msg", "Invalid value"),
        "type": error.get("type", "validation_error"),
    }
    # Convert non-serializable values (like ValueError) to strings
    if "ctx" in error:
        formatted_error["context"] = {
            key: str(value) if isinstance(value, Exception) else value
            for key, value in error["ctx"].items()
        }
    return formatted_error


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Render pydantic request validation failures as 400 responses.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with a readable ``error`` line and the itemized ``errors``.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = [_format_error(error) for error in exec_error.errors()]
    message = "; ".join(
        f"{error['field']}: {error['message']}" if error["field"] else error["message"]
        for error in formatted_errors
    )

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {message}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "error": message or "Validation failed",
            "errors": formatted_errors,
        },
    )


app_validation_exception_handler = create_exception_handler(logger)
