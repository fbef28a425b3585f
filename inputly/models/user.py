"""ORM model for application accounts (auth and RBAC)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from inputly.models.base import Base

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


class User(Base):
    """
    Account used for JWT authentication and role-based access control.

    email is stored lower-cased; password_hash never leaves the service layer.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_USER)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def identity(self) -> dict:
        """Claims that identify this account in an access token."""
        return {"id": self.id, "email": self.email, "role": self.role, "name": self.name}
