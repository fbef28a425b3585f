"""User management: CRUD over accounts with self-or-admin authorization."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inputly.core.errors import DuplicateAccount, Forbidden, NotFound, ValidationFailed
from inputly.core.security import hash_password
from inputly.models.user import ROLE_ADMIN, ROLE_USER, User
from inputly.schemas.auth import CurrentUser
from inputly.services import accounts

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "email", "password", "role"})


def is_admin(requester: CurrentUser) -> bool:
    return requester.role == ROLE_ADMIN


def can_modify(requester: CurrentUser, user_id: int) -> bool:
    """An account may be changed by its owner or by an admin."""
    return requester.id == user_id or is_admin(requester)


def list_users(db: Session, limit: int) -> list[User]:
    """Most recently created accounts first."""
    return (
        db.query(User)
        .order_by(User.created_at.desc(), User.id.desc())
        .limit(limit)
        .all()
    )


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def create_user(db: Session, fields: dict[str, Any]) -> User:
    """Admin-initiated account creation; same uniqueness and hashing as registration."""
    return accounts.register(
        db,
        name=fields["name"],
        email=fields["email"],
        password=fields["password"],
        role=fields.get("role") or ROLE_USER,
    )


def update_user(
    db: Session,
    user_id: int,
    updates: dict[str, Any],
    requester: CurrentUser,
) -> User:
    """
    Apply a partial update to an account.

    Owners may edit their own name, email and password; only admins may touch
    another account or change any role (including their own).
    """
    if not can_modify(requester, user_id):
        raise Forbidden("Forbidden: cannot update other users")
    if "role" in updates and not is_admin(requester):
        raise Forbidden("Forbidden: only admin can change role")

    user = get_user(db, user_id)

    unknown = set(updates) - UPDATABLE_FIELDS
    if unknown:
        raise ValidationFailed(f"Unsupported update fields: {sorted(unknown)}")

    if "email" in updates:
        email = accounts.normalize_email(updates["email"])
        owner = accounts.get_user_by_email(db, email)
        if owner is not None and owner.id != user.id:
            raise DuplicateAccount()
        user.email = email
    if "name" in updates:
        user.name = updates["name"]
    if "password" in updates:
        user.password_hash = hash_password(updates["password"])
    if "role" in updates:
        user.role = updates["role"]

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateAccount() from e
    db.refresh(user)
    logger.info(
        "User updated",
        extra={"user_id": user.id, "by": requester.id, "fields": sorted(updates)},
    )
    return user


def delete_user(db: Session, user_id: int, requester: CurrentUser) -> User:
    """Delete an account (self or admin); returns the removed record."""
    if not can_modify(requester, user_id):
        raise Forbidden("Forbidden: cannot delete other users")

    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("User deleted", extra={"user_id": user_id, "by": requester.id})
    return user
