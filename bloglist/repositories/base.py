"""Base repository for database operations."""

from logging import getLogger
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from bloglist.configs import file_logger
from bloglist.errors.database import DatabaseError, DuplicateEntryError

logger = file_logger(getLogger(__name__))


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing the lookups shared by every entity.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_all(self) -> list[ModelT]:
        """
        Get every record, oldest first.

        Returns:
            list[ModelT]: List of records
        """
        statement = select(self.model).order_by(self.model.created_at)  # type: ignore[attr-defined]
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            return False

        await self.session.delete(record)
        await self.session.flush()
        return True

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            # Driver text stays in the logs; clients only get the generic detail
            logger.warning(f"Integrity error saving {type(record).__name__}: {error_msg}")
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError from e
            raise DatabaseError from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Failed to save {type(record).__name__}")
            raise DatabaseError from e
