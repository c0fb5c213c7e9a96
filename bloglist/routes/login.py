"""Login route issuing bearer tokens."""

from logging import getLogger

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse

from bloglist.configs import file_logger
from bloglist.dependencies import AuthServiceDep
from bloglist.schemas import LoginRequest, LoginResponse
from bloglist.utils.helpers import host

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])

logger = file_logger(getLogger(__name__))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login",
    description="Exchange a username and password for a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unknown user or wrong password",
            "content": {
                "application/json": {"example": {"error": "invalid username or password"}},
            },
        },
    },
    operation_id="login",
)
async def login(
    request: Request,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> LoginResponse:
    """
    Authenticate a user and return a token.

    Parameters
    ----------
    request : Request
        Current request context.
    credentials : LoginRequest
        Username and password.
    auth_service : AuthService
        Authentication service.

    Returns
    -------
    LoginResponse
        Token with the user's username and name.
    """
    logger.info(f"Login attempt for {credentials.username} from ip: {host(request)}")
    return await auth_service.login(
        credentials.username,
        credentials.password.get_secret_value(),
    )
