"""User management endpoints: profile, admin CRUD and self-or-admin edits."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from inputly.api.deps import AuthenticatedUser, get_current_user, require_admin
from inputly.core.config import settings
from inputly.core.database import get_db
from inputly.schemas.auth import AuthResponse, RegisterRequest, UserPublic
from inputly.schemas.users import UserEnvelope, UsersListEnvelope, UserUpdate
from inputly.services import users as users_service

router = APIRouter()

UserId = Annotated[int, Path(gt=0, description="Account id")]
ADMIN_ONLY = [Depends(get_current_user), Depends(require_admin)]


@router.get("/me", response_model=AuthResponse, response_model_exclude_none=True)
def read_me(current_user: AuthenticatedUser) -> AuthResponse:
    """Return the identity carried by the caller's token."""
    return AuthResponse(message="User fetched successfully", user=current_user)


@router.get("", response_model=UsersListEnvelope, dependencies=ADMIN_ONLY)
def list_users(db: Annotated[Session, Depends(get_db)]) -> UsersListEnvelope:
    """Most recent accounts, newest first (admin only)."""
    rows = users_service.list_users(db, limit=settings.USERS_PAGE_SIZE)
    return UsersListEnvelope(
        message="Users fetched successfully",
        data=[UserPublic.model_validate(u) for u in rows],
    )


@router.get("/{user_id}", response_model=UserEnvelope, dependencies=ADMIN_ONLY)
def get_user(user_id: UserId, db: Annotated[Session, Depends(get_db)]) -> UserEnvelope:
    user = users_service.get_user(db, user_id)
    return UserEnvelope(message="User fetched successfully", data=UserPublic.model_validate(user))


@router.post(
    "",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=ADMIN_ONLY,
)
def create_user(body: RegisterRequest, db: Annotated[Session, Depends(get_db)]) -> UserEnvelope:
    user = users_service.create_user(db, body.model_dump())
    return UserEnvelope(message="User created successfully", data=UserPublic.model_validate(user))


@router.put("/{user_id}", response_model=UserEnvelope)
def update_user(
    user_id: UserId,
    body: UserUpdate,
    requester: AuthenticatedUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserEnvelope:
    """Update an account. Owners edit themselves; only admins edit others or change roles."""
    user = users_service.update_user(db, user_id, body.changes(), requester)
    return UserEnvelope(message="User updated successfully", data=UserPublic.model_validate(user))


@router.delete("/{user_id}", response_model=UserEnvelope)
def delete_user(
    user_id: UserId,
    requester: AuthenticatedUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserEnvelope:
    user = users_service.delete_user(db, user_id, requester)
    return UserEnvelope(message="User deleted successfully", data=UserPublic.model_validate(user))
