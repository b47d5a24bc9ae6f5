"""Pydantic schemas for user endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserUpdate(BaseModel):
    """Schema for editing the current user's profile."""

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)

    @field_validator("email")
    @classmethod
    def reject_null_email(cls, v: str | None) -> str | None:
        """Email identifies the account and cannot be cleared."""
        if v is None:
            raise ValueError("Email cannot be null")
        return v.lower()


class UserResponse(BaseModel):
    """Response model for user info. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime
