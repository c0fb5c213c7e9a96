"""User repository for database operations."""

from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.errors.database import DuplicateEntryError
from bloglist.managers import hash_password
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository

DUPLICATE_USERNAME_MESSAGE = "username must be unique"


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Besides plain lookups it maintains each user's ordered ``blog_ids``.
    """

    model = UserDB

    async def create(self, username: str, password: str, name: str | None = None) -> UserDB:
        """
        Create a new user with a hashed password.

        Args:
            username: Unique username
            password: Plain text password, hashed before storage
            name: Optional display name

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the username is taken
            DatabaseError: For other database errors
        """
        if await self.get_by_username(username):
            raise DuplicateEntryError(detail=DUPLICATE_USERNAME_MESSAGE)

        db_user = UserDB(
            username=username,
            name=name,
            password_hash=await hash_password(password),
        )
        try:
            return await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            # Lost a race with a concurrent signup for the same username
            raise DuplicateEntryError(detail=DUPLICATE_USERNAME_MESSAGE) from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()

    async def add_blog_id(self, user: UserDB, blog_id: UUID) -> UserDB:
        """
        Append a blog id to the user's owned blogs.

        Args:
            user: Owning user
            blog_id: Newly created blog UUID

        Returns:
            UserDB: The refreshed user
        """
        # Assign a new list so the JSON column is flagged as modified
        user.blog_ids = [*user.blog_ids, str(blog_id)]
        return await self._add_and_refresh(user)

    async def remove_blog_id(self, user: UserDB, blog_id: UUID) -> UserDB:
        """
        Remove a blog id from the user's owned blogs.

        Args:
            user: Owning user
            blog_id: Deleted blog UUID

        Returns:
            UserDB: The refreshed user
        """
        user.blog_ids = [existing for existing in user.blog_ids if existing != str(blog_id)]
        return await self._add_and_refresh(user)
