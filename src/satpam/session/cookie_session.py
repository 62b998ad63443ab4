"""Cookie-backed session value holder and URL token detection."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

from satpam.session.cookies import CookieOptions, parse_cookies, serialize_cookie


@dataclass
class SessionValue:
    token: str | None = None
    refresh: str | None = None


class CookieSession:
    """Holds a session token pair and renders it back into cookies.

    Use ``create_cookie_session`` to build one from a ``Cookie`` header.
    """

    def __init__(
        self,
        token_name: str,
        refresh_name: str | None = None,
        cookie_options: CookieOptions | None = None,
        value: SessionValue | None = None,
    ) -> None:
        self.token_name = token_name
        self.refresh_name = refresh_name
        self.cookie_options = cookie_options
        self._value = value or SessionValue()

    def get(self) -> SessionValue:
        return self._value

    def has(self, key: str) -> bool:
        """Check for a non-empty ``"token"`` or ``"refresh"`` value."""
        if key == "token":
            return bool(self._value.token)
        if key == "refresh":
            return bool(self._value.refresh)
        raise ValueError(f"unknown session key: {key!r}")

    def set(self, token: str, refresh: str | None = None) -> None:
        self._value.token = token or None
        self._value.refresh = refresh or None

    def serialize_token(self) -> str:
        """``Set-Cookie`` value for the token, ``""`` when there is none."""
        if not self._value.token:
            return ""
        return serialize_cookie(self.token_name, self._value.token, self.cookie_options)

    def serialize_refresh(self) -> str:
        if not self.refresh_name or not self._value.refresh:
            return ""
        return serialize_cookie(self.refresh_name, self._value.refresh, self.cookie_options)


def create_cookie_session(
    token_name: str = "token",
    refresh_name: str | None = None,
    cookie: str = "",
    cookie_options: CookieOptions | None = None,
) -> CookieSession:
    """Build a ``CookieSession`` from a raw ``Cookie`` header.

    Empty cookie values count as absent.
    """
    value = SessionValue()
    if cookie:
        cookies = parse_cookies(cookie)
        value.token = cookies.get(token_name) or None
        if refresh_name:
            value.refresh = cookies.get(refresh_name) or None
    return CookieSession(token_name, refresh_name, cookie_options, value)


def detect_url(
    url: str,
    token_name: str = "token",
    refresh_name: str | None = None,
) -> SessionValue:
    """Read token and refresh token from the query string of ``url``."""
    params = parse_qs(urlsplit(str(url)).query)
    value = SessionValue()
    value.token = (params.get(token_name) or [None])[0] or None
    if refresh_name:
        value.refresh = (params.get(refresh_name) or [None])[0] or None
    return value
