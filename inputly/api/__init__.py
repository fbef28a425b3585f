"""API routes."""

from fastapi import APIRouter

from inputly.api import auth, submissions, users

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(submissions.router, prefix="/submissions", tags=["submissions"])
