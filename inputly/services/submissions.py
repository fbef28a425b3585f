"""Append-only text submissions."""

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import func
from sqlalchemy.orm import Session

from inputly.models import Submission

logger = logging.getLogger(__name__)


def create_submission(db: Session, text: str) -> Submission:
    """Persist a submission; text is expected to be validated and trimmed already."""
    submission = Submission(text=text)
    db.add(submission)
    db.commit()
    db.refresh(submission)
    logger.info("New submission created", extra={"submission_id": submission.id})
    return submission


def list_recent(db: Session, limit: int) -> list[Submission]:
    rows = (
        db.query(Submission)
        .order_by(Submission.created_at.desc(), Submission.id.desc())
        .limit(limit)
        .all()
    )
    logger.info("Retrieved last submissions", extra={"count": len(rows)})
    return rows


def submission_stats(db: Session, now: datetime | None = None) -> dict[str, int]:
    """Counts for monitoring: total, since UTC midnight, and in the last 24 hours."""
    now = now or datetime.now(timezone.utc)
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    day_ago = now - timedelta(hours=24)

    def _count_since(cutoff: datetime | None) -> int:
        q = db.query(func.count(Submission.id))
        if cutoff is not None:
            q = q.filter(Submission.created_at >= cutoff)
        return int(q.scalar() or 0)

    return {
        "total": _count_since(None),
        "today": _count_since(midnight),
        "last_24h": _count_since(day_ago),
    }
