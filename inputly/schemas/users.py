"""Request/response schemas for user management endpoints."""

from typing import Any

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from inputly.schemas.auth import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    MessageResponse,
    Role,
    UserPublic,
    clean_name,
)


class UserUpdate(BaseModel):
    """Partial account update; at least one field is required."""

    name: str | None = None
    email: EmailStr | None = None
    password: str | None = Field(
        default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN
    )
    role: Role | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        return None if v is None else clean_name(v)

    @model_validator(mode="after")
    def require_one_field(self) -> "UserUpdate":
        if not self.changes():
            raise ValueError("At least one field must be provided to update")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UserEnvelope(MessageResponse):
    data: UserPublic


class UsersListEnvelope(MessageResponse):
    data: list[UserPublic]
