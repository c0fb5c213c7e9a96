"""
Blog schemas for request validation and response serialization.

Responses use camelCase aliases (``ownerId``, ``createdAt``); requests accept
either spelling.
"""

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def coerce_likes(value: Any) -> int:
    """
    Normalize a submitted like count.

    Numeric strings are read as numbers. Anything that is not a non-negative
    whole number (absent, null, negative, fractional, non-numeric text or a
    boolean) becomes 0.

    Examples
    --------
    >>> coerce_likes(7), coerce_likes("5"), coerce_likes(None), coerce_likes("many")
    (7, 5, 0, 0)
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    if isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    return 0


class BlogCreate(BaseModel):
    """Blog creation body. The owner comes from the bearer token, never the body."""

    title: RequiredText = Field(..., max_length=300, examples=["React patterns"])
    author: RequiredText = Field(..., max_length=200, examples=["Michael Chan"])
    url: RequiredText = Field(..., max_length=2000, examples=["https://reactpatterns.com/"])
    likes: int = Field(default=0, description="Like count, coerced to 0 when invalid")

    @field_validator("likes", mode="before")
    @classmethod
    def normalize_likes(cls, value: Any) -> int:
        return coerce_likes(value)


class BlogUpdate(BaseModel):
    """
    Blog update body.

    The update replaces every mutable field: a field left out of the body is
    stored as null.
    """

    title: str | None = Field(default=None, max_length=300)
    author: str | None = Field(default=None, max_length=200)
    url: str | None = Field(default=None, max_length=2000)
    likes: int | None = Field(default=None, ge=0)


class OwnerSummary(BaseModel):
    """Owner details embedded in blog listings (no credentials)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    """Blog as returned to clients."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    title: str | None
    author: str | None
    url: str | None
    likes: int | None
    owner_id: UUID = Field(alias="ownerId")
    created_at: datetime = Field(alias="createdAt")


class BlogWithOwnerResponse(BlogResponse):
    """Blog listing entry with its owner's summary."""

    user: OwnerSummary | None = None
