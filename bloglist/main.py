"""Blog List Backend - blog listing API with bearer-token authentication."""

from logging import getLogger

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from bloglist.configs import file_logger, settings
from bloglist.db import get_database
from bloglist.errors import (
    AuthorizationError,
    DatabaseError,
    PasswordHashingError,
    ValidationError,
    app_validation_exception_handler,
    auth_exception_handler,
    create_unhandled_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from bloglist.middleware import LoggingMiddleware, configure_cors, lifespan
from bloglist.monitoring import configure_logging
from bloglist.routes import blogs_router, login_router, users_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str

configure_logging()

logger = file_logger(getLogger(__name__))

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog List Backend API",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)

routes = [
    blogs_router,
    users_router,
    login_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (AuthorizationError, auth_exception_handler),
    (ValidationError, app_validation_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (Exception, create_unhandled_exception_handler(logger)),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "ok",
                        "version": "1.0.0",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "healthy",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Service status and the database probe result.
    """
    database_ok = await get_database(request).ping()
    return HealthCheckResponse(
        status="ok" if database_ok else "degraded",
        version=app.version,
        timestamp=today_str(),
        database="healthy" if database_ok else "unhealthy",
    )


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    from uvicorn import run as uvicorn_run  # noqa: PLC0415

    uvicorn_run(
        "bloglist.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.ENVIRONMENT == "development",
        loop="uvloop",
        http="httptools",
    )


if __name__ == "__main__":
    run()
