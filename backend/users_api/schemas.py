"""Pydantic schemas used across the backend API."""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import INTEGER_MAX, INTEGER_MIN


def to_naive_utc(value: datetime | None) -> datetime | None:
    """Convert an offset-aware timestamp to naive UTC, as the columns store it."""

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class User(BaseModel):
    """A full row from a tenant's users table, secrets included.

    Only the persistence layer and request handlers see this model;
    responses are always built from ``UserRead``.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, ge=1, le=INTEGER_MAX)
    user_name: str
    email: str
    password_hash: str
    otp_secret_key: str | None = None
    type: int = Field(ge=INTEGER_MIN, le=INTEGER_MAX)
    authority_data: str | None = None
    failed_count: int = Field(default=0, ge=INTEGER_MIN, le=INTEGER_MAX)
    unlock_at: datetime | None = None
    is_reset_password: bool = False
    last_update_password: datetime

    @field_validator("unlock_at", "last_update_password")
    @classmethod
    def normalize_timestamps(cls, value: datetime | None) -> datetime | None:
        return to_naive_utc(value)


class UserBase(BaseModel):
    """Fields a client may set on a user."""

    user_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    type: int = Field(ge=INTEGER_MIN, le=INTEGER_MAX)
    authority_data: str | None = None
    failed_count: int = Field(default=0, ge=0, le=INTEGER_MAX)
    unlock_at: datetime | None = None
    is_reset_password: bool = False

    @field_validator("unlock_at")
    @classmethod
    def normalize_unlock_at(cls, value: datetime | None) -> datetime | None:
        return to_naive_utc(value)


class UserCreate(UserBase):
    """Payload for creating a user."""

    password: str = Field(min_length=1)
    otp_secret_key: str | None = None


class UserUpdate(UserBase):
    """Payload for replacing a user.

    Omitting ``password`` keeps the stored hash.
    """

    password: str | None = Field(default=None, min_length=1)
    otp_secret_key: str | None = None


class UserRead(BaseModel):
    """Public representation of a user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_name: str
    email: str
    type: int
    authority_data: str | None = None
    failed_count: int
    unlock_at: datetime | None = None
    is_reset_password: bool
    last_update_password: datetime


class UserSearchResponse(BaseModel):
    """One page of search results plus the unpaginated match count."""

    items: list[UserRead]
    total: int
