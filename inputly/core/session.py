"""How the access token travels: Authorization header or HTTP-only cookie.

Tokens are read from a fixed list of credential sources, bearer header first.
The cookie is written and cleared with the same attributes; browsers ignore a
delete whose httponly/secure/samesite/path differ from the ones the cookie was set with.
"""

from typing import Protocol

from fastapi import Request, Response

from inputly.core.config import settings

BEARER_PREFIX = "bearer "


class CredentialSource(Protocol):
    """Something that can pull a raw token out of a request."""

    def extract(self, request: Request) -> str | None: ...


class BearerHeaderSource:
    """Authorization: Bearer <token>."""

    def extract(self, request: Request) -> str | None:
        header = request.headers.get("authorization", "")
        if not header.lower().startswith(BEARER_PREFIX):
            return None
        token = header[len(BEARER_PREFIX):].strip()
        return token or None


class CookieSource:
    """HTTP-only session cookie."""

    def __init__(self, cookie_name: str) -> None:
        self.cookie_name = cookie_name

    def extract(self, request: Request) -> str | None:
        token = request.cookies.get(self.cookie_name, "").strip()
        return token or None


CREDENTIAL_SOURCES: tuple[CredentialSource, ...] = (
    BearerHeaderSource(),
    CookieSource(settings.AUTH_COOKIE_NAME),
)


def extract_token(request: Request) -> str | None:
    """Return the first token found, trying each credential source in order."""
    for source in CREDENTIAL_SOURCES:
        token = source.extract(request)
        if token:
            return token
    return None


def _cookie_attributes() -> dict:
    return {
        "path": "/",
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": "strict",
    }


def set_session_cookie(response: Response, token: str) -> None:
    """Store the token in the session cookie."""
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.AUTH_COOKIE_MAX_AGE_DAYS * 24 * 60 * 60,
        **_cookie_attributes(),
    )


def clear_session_cookie(response: Response) -> None:
    """Remove the session cookie using the attributes it was set with."""
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, **_cookie_attributes())
