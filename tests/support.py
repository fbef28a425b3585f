"""Shared test cases: a fresh schema per test and an API client bound to it."""

import unittest

from fastapi.testclient import TestClient
from starlette.requests import Request

from inputly.core.database import SessionLocal, engine
from inputly.main import app
from inputly.models import Base


def make_request(
    headers: dict[str, str] | None = None,
    cookies: dict[str, str] | None = None,
    path: str = "/",
) -> Request:
    """Build a bare Starlette request with the given headers and cookies."""
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    if cookies:
        raw.append((b"cookie", "; ".join(f"{k}={v}" for k, v in cookies.items()).encode()))
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "path": path,
        "root_path": "",
        "query_string": b"",
        "headers": raw,
    }
    return Request(scope)


class DatabaseTestCase(unittest.TestCase):
    """Creates all tables before each test and drops them after."""

    def setUp(self) -> None:
        Base.metadata.create_all(engine)
        self.db = SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(engine)


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient that returns 500s instead of raising."""

    def setUp(self) -> None:
        super().setUp()
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self) -> None:
        self.client.close()
        super().tearDown()

    def register(
        self,
        name: str = "Ann Lee",
        email: str = "ann@x.com",
        password: str = "password1",
        role: str = "user",
    ) -> tuple[dict, str]:
        """Register through the API; return (user, token) and leave no cookie behind."""
        response = self.client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password, "role": role},
        )
        self.assertEqual(response.status_code, 201, response.text)
        body = response.json()
        self.client.cookies.clear()
        return body["user"], body["token"]

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
