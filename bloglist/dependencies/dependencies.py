"""Application dependencies: sessions, repositories and bearer authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.errors.auth import InvalidTokenError, TokenMissingError
from bloglist.managers.token_manager import decode_access_token
from bloglist.models import UserDB
from bloglist.monitoring import bind_user_id
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.services import AuthService

# auto_error is off so that a missing or non-bearer header maps to our own 401
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    """Dependency to get AuthService."""
    return AuthService(user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Resolve the caller from the ``Authorization: Bearer <token>`` header.

    Parameters
    ----------
    token : str | None
        Bearer token, or None when the header is absent or not a bearer scheme.
    user_repo : UserRepository
        Repository used to load the user named by the token.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    TokenMissingError
        If no bearer token was sent.
    InvalidTokenError
        If the token is invalid or expired, or its user no longer exists.
    """
    if not token:
        raise TokenMissingError

    token_data = decode_access_token(token)
    if not token_data:
        raise InvalidTokenError

    user = await user_repo.get_by_id(token_data.user_id)
    if not user:
        raise InvalidTokenError(detail="user not found")

    bind_user_id(str(user.id))
    return user


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]
