"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Title, author and url are required when a blog is created; the update
    endpoint replaces them wholesale, so the columns themselves accept null.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User
    owner_id: UUID = Field(
        sa_column=Column(
            "owner_id",
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    title: str | None = Field(
        default=None,
        sa_column=Column(String(300), nullable=True),
        description="Blog title",
    )
    author: str | None = Field(
        default=None,
        sa_column=Column(String(200), nullable=True, index=True),
        description="Blog author",
    )
    url: str | None = Field(
        default=None,
        sa_column=Column(String(2000), nullable=True),
        description="Blog URL",
    )
    likes: int | None = Field(
        default=0,
        nullable=True,
        description="Like count",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "owner_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Type wars",
                "author": "Robert C. Martin",
                "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
                "likes": 2,
            },
        },
    )
