"""Submissions endpoints: post free text, read the latest entries and counts."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from inputly.api.deps import get_current_user, require_admin
from inputly.core.config import settings
from inputly.core.database import get_db
from inputly.schemas.submissions import (
    SubmissionCreate,
    SubmissionEnvelope,
    SubmissionOut,
    SubmissionStats,
    SubmissionStatsEnvelope,
    SubmissionsListEnvelope,
)
from inputly.services import submissions as submissions_service

router = APIRouter()


@router.post("", response_model=SubmissionEnvelope, status_code=status.HTTP_201_CREATED)
def create_submission(
    body: SubmissionCreate,
    db: Annotated[Session, Depends(get_db)],
) -> SubmissionEnvelope:
    submission = submissions_service.create_submission(db, body.text)
    return SubmissionEnvelope(
        message="Submission created successfully",
        data=SubmissionOut.model_validate(submission),
    )


@router.get("", response_model=SubmissionsListEnvelope)
def list_submissions(db: Annotated[Session, Depends(get_db)]) -> SubmissionsListEnvelope:
    """Latest submissions, newest first."""
    rows = submissions_service.list_recent(db, limit=settings.SUBMISSIONS_PAGE_SIZE)
    return SubmissionsListEnvelope(
        message="Submissions fetched successfully",
        data=[SubmissionOut.model_validate(s) for s in rows],
    )


@router.get(
    "/stats",
    response_model=SubmissionStatsEnvelope,
    dependencies=[Depends(get_current_user), Depends(require_admin)],
)
def get_submission_stats(db: Annotated[Session, Depends(get_db)]) -> SubmissionStatsEnvelope:
    """Submission counts for monitoring (admin only)."""
    stats = submissions_service.submission_stats(db)
    return SubmissionStatsEnvelope(
        message="Submission stats fetched successfully",
        data=SubmissionStats(**stats),
    )
