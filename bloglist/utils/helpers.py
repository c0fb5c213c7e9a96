"""Small request and time helpers shared by handlers, middleware and logging."""

from datetime import datetime

from fastapi import Request
from starlette.routing import Match

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def host(request: Request) -> str:
    """Return the client IP address, or ``unknown`` when the transport hides it."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time formatted for logs and health responses."""
    return datetime.now().astimezone().strftime(TIMESTAMP_FORMAT)


def get_summary(request: Request) -> str | None:
    """
    Return the summary of the route that will serve `request`.

    Falls back to the route name for plain Starlette routes, and to None when
    no route matches (the request will end in a 404).
    """
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match is Match.FULL:
            return getattr(route, "summary", None) or getattr(route, "name", None)
    return None
