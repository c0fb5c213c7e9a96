"""
Middleware components for the Blog List backend.

This module contains the lifespan handler that opens and closes the
database, request logging with per-request context, and CORS setup.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from bloglist.configs import file_logger, settings
from bloglist.db import Database
from bloglist.monitoring import bind_request_id, clear_context
from bloglist.utils.helpers import get_summary, host

logger = file_logger(getLogger(__name__))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Open the database on startup and close it on shutdown."""
    logger.info(f"Starting {app.title}...")

    database = Database(settings)
    try:
        await database.init()
    except Exception:
        logger.exception("Failed to initialize services")
        await database.close()
        raise
    app.state.database = database

    logger.info("Services initialized successfully")
    logger.info("  - API Documentation: http://localhost:8000/docs")
    logger.info("  - Health Check: http://localhost:8000/health")

    yield

    logger.info(f"Shutting down {app.title}...")
    try:
        await database.close()
    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing, scoping log context to the request."""
        clear_context()
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        bind_request_id(request_id)

        try:
            start_time = perf_counter()
            route_info = get_summary(request) or f"{request.method} {request.url.path}"
            logger.info(f"Request: {route_info}, from ip: {host(request)}")

            response = await call_next(request)

            duration = perf_counter() - start_time
            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path} "
                f"in {duration:.2f}s",
            )
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            clear_context()
