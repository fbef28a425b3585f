"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

NAME_MIN_LEN = 3
NAME_MAX_LEN = 30
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128

Role = Literal["user", "admin"]


def clean_name(v: str) -> str:
    v = v.strip()
    if not (NAME_MIN_LEN <= len(v) <= NAME_MAX_LEN):
        raise ValueError(
            f"Name must be between {NAME_MIN_LEN} and {NAME_MAX_LEN} characters long"
        )
    return v


class RegisterRequest(BaseModel):
    """Fields for creating an account (public registration or admin creation)."""

    name: str = Field(..., description="Display name (3-30 chars)")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )
    role: Role = Field(default="user", description="Account role")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return clean_name(v)


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )


class CurrentUser(BaseModel):
    """Request identity (id, email, role, name); mirrors access token claims."""

    id: int
    email: str
    role: Role
    name: str


class UserPublic(BaseModel):
    """Account as returned to clients (no password hash)."""

    id: int
    name: str
    email: str
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str


class AuthResponse(MessageResponse):
    """Response for register, login and /users/me."""

    user: UserPublic | CurrentUser
    token: str | None = Field(default=None, description="Access token for Bearer clients")
