"""Pydantic request/response schemas."""

from inputly.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserPublic,
)
from inputly.schemas.health import HealthResponse
from inputly.schemas.submissions import (
    SubmissionCreate,
    SubmissionEnvelope,
    SubmissionOut,
    SubmissionStats,
    SubmissionStatsEnvelope,
    SubmissionsListEnvelope,
)
from inputly.schemas.users import UserEnvelope, UsersListEnvelope, UserUpdate

__all__ = [
    "AuthResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "SubmissionCreate",
    "SubmissionEnvelope",
    "SubmissionOut",
    "SubmissionStats",
    "SubmissionStatsEnvelope",
    "SubmissionsListEnvelope",
    "UserEnvelope",
    "UserPublic",
    "UserUpdate",
    "UsersListEnvelope",
]
