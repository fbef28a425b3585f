"""ORM model for free-text submissions (append-only)."""

from sqlalchemy import Column, DateTime, Integer, Text, func

from inputly.models.base import Base


class Submission(Base):
    __tablename__ = "submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
