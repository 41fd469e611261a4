"""Authentication schemas."""

from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_validator

from naai.models.enums import UserRole
from naai.schemas.base import CamelModel

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 72  # bcrypt ignores anything past 72 bytes


def normalize_email(value: object) -> str:
    """Validate an email address and return its lowercased canonical form."""
    if not isinstance(value, str):
        raise ValueError("Valid email is required")
    try:
        # Display-name forms such as "Eve <eve@example.com>" are rejected
        result = validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("Valid email is required") from None
    return result.normalized.lower()


class UserSignup(CamelModel):
    """User signup request."""

    email: str = Field(..., max_length=255)
    password: str
    name: str | None = Field(None, max_length=255)
    role: UserRole = UserRole.CUSTOMER

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, value: object) -> str:
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        if len(value.encode("utf-8")) > PASSWORD_MAX_LENGTH:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_LENGTH} bytes")
        return value

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("Name must not be empty")
        return value

    @field_validator("role", mode="before")
    @classmethod
    def check_role(cls, value: object) -> object:
        if value is None:
            return UserRole.CUSTOMER
        if not isinstance(value, str) or value not in {role.value for role in UserRole}:
            raise ValueError("Role must be either customer or barber")
        return value


class UserLogin(CamelModel):
    """User login request."""

    email: str = Field(..., max_length=255)
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, value: object) -> str:
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class UserResponse(CamelModel):
    """Public projection of a user; never carries the password hash."""

    id: int
    email: str
    name: str | None
    role: UserRole
    created_at: datetime


class AuthResponse(CamelModel):
    """Authentication response with token and user info."""

    message: str
    user: UserResponse
    token: str


class MeResponse(CamelModel):
    user: UserResponse
