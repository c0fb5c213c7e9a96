"""User Routes: signup and listing."""

from logging import getLogger

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from bloglist.configs import file_logger
from bloglist.dependencies import AuthServiceDep, UserRepoDep
from bloglist.schemas import UserCreate, UserResponse
from bloglist.utils.helpers import host

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = file_logger(getLogger(__name__))

USER_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "username": "mluukkai",
    "name": "Matti Luukkainen",
    "blogIds": [],
    "createdAt": "2025-01-01T12:00:00Z",
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a user. Username and password must both be at least 3 characters.",
    responses={
        201: {"content": {"application/json": {"example": USER_EXAMPLE}}},
        400: {
            "description": "Missing, short or duplicate credentials",
            "content": {
                "application/json": {
                    "example": {"error": "username or password length is less than 3"},
                },
            },
        },
    },
    operation_id="users_create",
)
async def create_user(
    request: Request,
    user: UserCreate,
    auth_service: AuthServiceDep,
) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    request : Request
        Current request context.
    user : UserCreate
        Signup body.
    auth_service : AuthService
        Service applying the signup rules.

    Returns
    -------
    UserResponse
        The created user without credentials.
    """
    db_user = await auth_service.register_user(user)
    logger.info(f"User {db_user.username} registered from ip: {host(request)}")
    return UserResponse.model_validate(db_user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="List all users",
    responses={200: {"content": {"application/json": {"example": [USER_EXAMPLE]}}}},
    operation_id="users_list",
)
async def list_users(repo: UserRepoDep) -> list[UserResponse]:
    """Return every user with the ids of the blogs they created."""
    return [UserResponse.model_validate(user) for user in await repo.get_all()]
