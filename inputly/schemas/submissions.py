"""Request/response schemas for text submissions."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from inputly.schemas.auth import MessageResponse

SUBMISSION_MAX_LEN = 1000


class SubmissionCreate(BaseModel):
    text: str = Field(..., description="Free text, 1-1000 characters once trimmed")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Text is required and cannot be empty")
        if len(v) > SUBMISSION_MAX_LEN:
            raise ValueError(f"Text cannot exceed {SUBMISSION_MAX_LEN} characters")
        return v


class SubmissionOut(BaseModel):
    id: int
    text: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class SubmissionStats(BaseModel):
    total: int
    today: int
    last_24h: int


class SubmissionEnvelope(MessageResponse):
    data: SubmissionOut


class SubmissionsListEnvelope(MessageResponse):
    data: list[SubmissionOut]


class SubmissionStatsEnvelope(MessageResponse):
    data: SubmissionStats
