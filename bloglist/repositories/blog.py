"""Blog repository for database operations."""

from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Ownership rules live in the route handlers; this class only reads and
    writes rows.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, owner_id: UUID) -> BlogDB:
        """
        Create a new blog owned by `owner_id`.

        Args:
            blog: Validated blog body
            owner_id: UUID of the authenticated caller

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            owner_id=owner_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
        return await self._add_and_refresh(db_blog)

    async def get_all_with_owner(self) -> list[tuple[BlogDB, UserDB | None]]:
        """
        Get every blog paired with its owner.

        The owner is None when the owning user row no longer exists.

        Returns:
            list[tuple[BlogDB, UserDB | None]]: Blogs with their owners, oldest first
        """
        statement = (
            select(BlogDB, UserDB)
            .outerjoin(UserDB, cast(ColumnElement[bool], BlogDB.owner_id == UserDB.id))
            .order_by(BlogDB.created_at)  # type: ignore[arg-type]
        )
        result = await self.session.execute(statement)
        return [(blog, owner) for blog, owner in result.all()]

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:
        """
        Replace the mutable fields of a blog.

        Every field of `blog_update` is written, including the ones the
        client left out (which arrive as None).

        Args:
            blog_id: Blog UUID
            blog_update: Replacement values

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if not db_blog:
            return None

        for key, value in blog_update.model_dump().items():
            setattr(db_blog, key, value)

        return await self._add_and_refresh(db_blog)
