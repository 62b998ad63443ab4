"""Tests for the cookie header codec."""

from __future__ import annotations

from datetime import datetime, timezone
from http.cookies import CookieError

import pytest

from satpam.session import CookieOptions, parse_cookies, serialize_cookie


class TestParseCookies:

    def test_parses_header(self) -> None:
        cookies = parse_cookies("satpam=jwt.token; crsf=any;")
        assert cookies == {"satpam": "jwt.token", "crsf": "any"}

    def test_mapping_is_copied(self) -> None:
        source = {"satpam": "jwt.token"}
        parsed = parse_cookies(source)
        assert parsed == source
        assert parsed is not source

    @pytest.mark.parametrize("value", [None, 42, ""])
    def test_missing_header(self, value: object) -> None:
        assert parse_cookies(value) == {}  # type: ignore[arg-type]


class TestSerializeCookie:

    def test_defaults(self) -> None:
        cookie = serialize_cookie("satpam", "jwt.token")
        assert cookie.startswith("satpam=jwt.token;")
        assert "Max-Age=604800" in cookie
        assert "SameSite=Strict" in cookie

    def test_options(self) -> None:
        cookie = serialize_cookie("satpam", "jwt.token", CookieOptions(
            path="/",
            max_age=3600,
            secure=True,
            http_only=True,
            same_site=True,
            domain="example.com",
        ))
        for part in ("Max-Age=3600", "Path=/", "Secure", "HttpOnly",
                     "SameSite=Strict", "Domain=example.com"):
            assert part in cookie

    def test_serialized_cookie_parses_back(self) -> None:
        cookie = serialize_cookie("satpam", "jwt.token", CookieOptions(http_only=True))
        assert parse_cookies(cookie)["satpam"] == "jwt.token"

    def test_same_site_lax(self) -> None:
        assert "SameSite=Lax" in serialize_cookie("a", "b", CookieOptions(same_site="lax"))

    def test_same_site_omitted(self) -> None:
        assert "SameSite" not in serialize_cookie("a", "b", CookieOptions(same_site=False))

    def test_same_site_invalid(self) -> None:
        with pytest.raises(ValueError):
            serialize_cookie("a", "b", CookieOptions(same_site="sometimes"))

    def test_expires(self) -> None:
        moment = datetime(2030, 1, 1, tzinfo=timezone.utc)
        cookie = serialize_cookie("a", "b", CookieOptions(expires=moment))
        assert "01 Jan 2030 00:00:00 GMT" in cookie

    def test_naive_expires_treated_as_utc(self) -> None:
        cookie = serialize_cookie("a", "b", CookieOptions(expires=datetime(2030, 1, 1)))
        assert "01 Jan 2030 00:00:00 GMT" in cookie

    def test_illegal_name(self) -> None:
        with pytest.raises(CookieError):
            serialize_cookie("bad name", "b")
