"""Unit tests for inputly.core.session: token extraction order and cookie attributes."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi import Response

from inputly.core.session import (
    BearerHeaderSource,
    CookieSource,
    clear_session_cookie,
    extract_token,
    set_session_cookie,
)
from tests.support import make_request


class TestExtractToken(unittest.TestCase):
    def test_no_credentials(self) -> None:
        self.assertIsNone(extract_token(make_request()))

    def test_bearer_header(self) -> None:
        request = make_request(headers={"Authorization": "Bearer abc.def.ghi"})
        self.assertEqual(extract_token(request), "abc.def.ghi")

    def test_cookie(self) -> None:
        request = make_request(cookies={"token": "cookie.token.value"})
        self.assertEqual(extract_token(request), "cookie.token.value")

    def test_bearer_wins_over_cookie(self) -> None:
        request = make_request(
            headers={"Authorization": "Bearer header.token"},
            cookies={"token": "cookie.token"},
        )
        self.assertEqual(extract_token(request), "header.token")

    def test_non_bearer_scheme_falls_back_to_cookie(self) -> None:
        request = make_request(
            headers={"Authorization": "Basic dXNlcjpwYXNz"},
            cookies={"token": "cookie.token"},
        )
        self.assertEqual(extract_token(request), "cookie.token")

    def test_empty_bearer_is_ignored(self) -> None:
        self.assertIsNone(BearerHeaderSource().extract(make_request(headers={"Authorization": "Bearer "})))

    def test_cookie_source_uses_its_name(self) -> None:
        request = make_request(cookies={"other": "x"})
        self.assertIsNone(CookieSource("token").extract(request))
        self.assertEqual(CookieSource("other").extract(request), "x")


def _set_cookie_header(response: Response) -> str:
    headers = response.headers.getlist("set-cookie")
    assert len(headers) == 1, headers
    return headers[0].lower()


class TestSessionCookie(unittest.TestCase):
    def test_set_cookie_attributes(self) -> None:
        response = Response()
        set_session_cookie(response, "abc")
        header = _set_cookie_header(response)
        self.assertTrue(header.startswith("token=abc"))
        self.assertIn("httponly", header)
        self.assertIn("samesite=strict", header)
        self.assertIn("path=/", header)
        self.assertIn("max-age=604800", header)
        self.assertNotIn("secure", header)

    def test_clear_cookie_uses_same_attributes(self) -> None:
        response = Response()
        clear_session_cookie(response)
        header = _set_cookie_header(response)
        self.assertTrue(header.startswith("token="))
        self.assertIn("max-age=0", header)
        self.assertIn("httponly", header)
        self.assertIn("samesite=strict", header)
        self.assertIn("path=/", header)

    def test_secure_in_prod_for_set_and_clear(self) -> None:
        prod = MagicMock()
        prod.AUTH_COOKIE_NAME = "token"
        prod.AUTH_COOKIE_MAX_AGE_DAYS = 7
        prod.cookie_secure = True
        with patch("inputly.core.session.settings", prod):
            set_response = Response()
            set_session_cookie(set_response, "abc")
            clear_response = Response()
            clear_session_cookie(clear_response)
        self.assertIn("secure", _set_cookie_header(set_response))
        self.assertIn("secure", _set_cookie_header(clear_response))


if __name__ == "__main__":
    unittest.main()
