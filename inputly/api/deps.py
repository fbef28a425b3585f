"""Auth dependencies: optional-attach, required-attach and role gates.

attach_user runs for every request (installed on the app). Routes that need an
identity add get_current_user, and role-gated routes add require_role(...)
after it. The identity is kept on request.state.user for the request only.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from pydantic import ValidationError

from inputly.core.errors import Forbidden, InternalError, Unauthenticated
from inputly.core.security import decode_access_token
from inputly.core.session import extract_token
from inputly.models.user import ROLE_ADMIN
from inputly.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)


def _identity_from_token(token: str) -> CurrentUser:
    claims = decode_access_token(token)
    try:
        return CurrentUser.model_validate(claims)
    except ValidationError as e:
        raise Unauthenticated("Invalid or expired token") from e


def attach_user(request: Request) -> CurrentUser | None:
    """Attach the identity when a valid token is present; never rejects the request.

    A rejected token is remembered on request.state.auth_error so that
    get_current_user can fail without decoding (and logging) it a second time.
    """
    request.state.user = None
    request.state.auth_error = None
    token = extract_token(request)
    if token is None:
        return None
    try:
        request.state.user = _identity_from_token(token)
    except Unauthenticated as e:
        request.state.auth_error = e
        logger.warning(
            "Ignoring invalid token",
            extra={"reason": type(e).__name__, "path": request.url.path},
        )
    return request.state.user


def get_current_user(request: Request) -> CurrentUser:
    """Dependency: require a valid token (bearer or cookie). Raises 401 if missing or invalid."""
    user: CurrentUser | None = getattr(request.state, "user", None)
    if user is not None:
        return user
    error: Unauthenticated | None = getattr(request.state, "auth_error", None)
    if error is not None:
        raise error
    token = extract_token(request)
    if token is None:
        raise Unauthenticated()
    try:
        user = _identity_from_token(token)
    except Unauthenticated as e:
        logger.warning(
            "Rejecting invalid token",
            extra={"reason": type(e).__name__, "path": request.url.path},
        )
        raise
    request.state.user = user
    return user


def require_role(role: str):
    """Build a dependency that admits only identities with the given role.

    Must be mounted after get_current_user; a missing identity is a server bug.
    """

    def role_gate(request: Request) -> CurrentUser:
        user: CurrentUser | None = getattr(request.state, "user", None)
        if user is None:
            logger.error(
                "require_role(%s) reached without an authenticated identity", role,
                extra={"path": request.url.path},
            )
            raise InternalError("Authorization error")
        if user.role != role:
            raise Forbidden(f"Forbidden: requires {role} role")
        return user

    return role_gate


require_admin = require_role(ROLE_ADMIN)

AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
