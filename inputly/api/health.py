"""Liveness endpoints with an optional database connectivity check."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inputly.core.config import settings
from inputly.core.database import check_db_connected, get_db
from inputly.schemas.health import HealthResponse

router = APIRouter()

STARTED_AT = time.monotonic()


@router.get("/health", response_model=HealthResponse)
@router.get("/api", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        uptime=round(time.monotonic() - STARTED_AT, 3),
        environment=settings.APP_ENV,
        database=db_status,
    )
