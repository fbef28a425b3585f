"""SQLAlchemy ORM models."""

from inputly.models.base import Base
from inputly.models.submission import Submission
from inputly.models.user import User

__all__ = ["Base", "Submission", "User"]
