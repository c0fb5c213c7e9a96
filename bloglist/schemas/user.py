"""User schemas for signup and responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bloglist.configs import MAX_NAME_LENGTH, MAX_USERNAME_LENGTH


class UserCreate(BaseModel):
    """
    Signup body.

    Presence and minimum length rules are checked by the handler so that each
    failure carries its own message; the schema only fixes types and caps.
    """

    username: str | None = Field(
        default=None,
        max_length=MAX_USERNAME_LENGTH,
        examples=["mluukkai"],
    )
    name: str | None = Field(default=None, max_length=MAX_NAME_LENGTH, examples=["Matti Luukkainen"])
    password: SecretStr | None = Field(default=None, examples=["salainen"])


class UserResponse(BaseModel):
    """User as returned to clients. The password hash is never included."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blog_ids: list[UUID] = Field(default_factory=list, alias="blogIds")
    created_at: datetime = Field(alias="createdAt")
