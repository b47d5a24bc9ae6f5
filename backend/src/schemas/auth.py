"""Pydantic schemas for signup and signin."""
from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only looks at the first 72 bytes of input
MAX_PASSWORD_BYTES = 72


class AuthCredentials(BaseModel):
    """Email and password, used by both signup and signin."""

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Emails are stored and compared lowercased."""
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Reject passwords bcrypt would silently truncate."""
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password exceeds maximum length of {MAX_PASSWORD_BYTES} bytes.",
            )
        return v


class TokenResponse(BaseModel):
    """Access token returned on successful signup or signin."""

    access_token: str
    token_type: str = "bearer"
