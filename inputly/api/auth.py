"""Register, login and logout; issue and clear the session token."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from inputly.core.config import settings
from inputly.core.database import get_db
from inputly.core.errors import Forbidden
from inputly.core.security import create_access_token
from inputly.core.session import clear_session_cookie, set_session_cookie
from inputly.models.user import ROLE_ADMIN, User
from inputly.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserPublic,
)
from inputly.services import accounts

logger = logging.getLogger(__name__)
router = APIRouter()


def _start_session(response: Response, user: User, message: str) -> AuthResponse:
    token = create_access_token(user.identity())
    set_session_cookie(response, token)
    return AuthResponse(message=message, user=UserPublic.model_validate(user), token=token)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Create an account, sign the caller in and set the session cookie."""
    if body.role == ROLE_ADMIN and not settings.AUTH_ALLOW_ADMIN_REGISTRATION:
        raise Forbidden("Forbidden: admin accounts cannot self-register")
    user = accounts.register(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
    )
    logger.info("User registered", extra={"user_id": user.id, "role": user.role})
    return _start_session(response, user, "User registered successfully")


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Authenticate with email and password; sets the session cookie.
    The token is also returned for clients that send it as: Authorization: Bearer <token>
    """
    user = accounts.authenticate(db, body.email, body.password)
    logger.info("User logged in", extra={"user_id": user.id})
    return _start_session(response, user, "User logged in successfully")


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> MessageResponse:
    """Tell the client to drop its session cookie. Tokens are stateless and not revoked."""
    clear_session_cookie(response)
    return MessageResponse(message="User logged out successfully")
