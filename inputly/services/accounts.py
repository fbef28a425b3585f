"""Account creation and credential checks against the users table."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inputly.core.errors import DuplicateAccount, InvalidCredentials
from inputly.core.security import hash_password, verify_password
from inputly.models.user import ROLE_USER, User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def register(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: str = ROLE_USER,
) -> User:
    """
    Create an account with a hashed password.

    Raises DuplicateAccount when the email is taken, including when a concurrent
    registration wins the race between the existence check and the insert.
    """
    email = normalize_email(email)
    if get_user_by_email(db, email) is not None:
        raise DuplicateAccount()

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Registration lost uniqueness race", extra={"email": email})
        raise DuplicateAccount() from e
    db.refresh(user)
    logger.info(
        "User created successfully",
        extra={"user_id": user.id, "email": user.email, "role": user.role},
    )
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """Return the account for valid credentials; InvalidCredentials otherwise."""
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentials()
    return user
