"""Cookie header codec built on ``http.cookies``.

``parse_cookies`` turns a ``Cookie`` request header into a plain dict and
``serialize_cookie`` renders one ``Set-Cookie`` value. Serialised cookies
default to a 7-day ``Max-Age`` and ``SameSite=Strict``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime
from http.cookies import SimpleCookie
from typing import Any, Mapping

DEFAULT_MAX_AGE = 7 * 24 * 60 * 60
DEFAULT_SAME_SITE = "strict"

_SAME_SITE_VALUES = {"strict": "Strict", "lax": "Lax", "none": "None"}


@dataclass(frozen=True)
class CookieOptions:
    """``Set-Cookie`` attributes.

    ``None`` means "not given": ``max_age`` and ``same_site`` then fall back
    to the defaults. Pass ``same_site=False`` to omit the attribute.
    ``same_site=True`` is the same as ``"strict"``.
    """

    domain: str | None = None
    expires: datetime | None = None
    http_only: bool = False
    max_age: int | None = None
    path: str | None = None
    same_site: bool | str | None = None
    secure: bool = False


def parse_cookies(cookies: str | Mapping[str, str] | None) -> dict[str, str]:
    """Parse a ``Cookie`` header.

    Args:
        cookies: The raw header, an already-parsed mapping (copied as is),
            or None.

    Returns:
        Cookie name to value. Empty when the header is missing.
    """
    if isinstance(cookies, str):
        jar = SimpleCookie()
        jar.load(cookies)
        return {name: morsel.value for name, morsel in jar.items()}
    if isinstance(cookies, Mapping):
        return dict(cookies)
    return {}


def serialize_cookie(name: str, value: str, options: CookieOptions | None = None) -> str:
    """Render a ``Set-Cookie`` header value.

    Raises:
        http.cookies.CookieError: If ``name`` has characters a cookie name
            cannot contain.
        ValueError: If ``same_site`` is not a recognised value.
    """
    opts = options or CookieOptions()
    jar = SimpleCookie()
    jar[name] = value
    morsel = jar[name]

    max_age = DEFAULT_MAX_AGE if opts.max_age is None else opts.max_age
    morsel["max-age"] = str(int(max_age))

    same_site = _same_site(DEFAULT_SAME_SITE if opts.same_site is None else opts.same_site)
    if same_site:
        morsel["samesite"] = same_site
    if opts.domain:
        morsel["domain"] = opts.domain
    if opts.path:
        morsel["path"] = opts.path
    if opts.expires is not None:
        morsel["expires"] = _http_date(opts.expires)
    if opts.http_only:
        morsel["httponly"] = True
    if opts.secure:
        morsel["secure"] = True
    return morsel.OutputString()


def _same_site(value: Any) -> str:
    if value is True:
        return _SAME_SITE_VALUES["strict"]
    if value is False:
        return ""
    try:
        return _SAME_SITE_VALUES[str(value).lower()]
    except KeyError:
        raise ValueError(f"invalid same_site value: {value!r}") from None


def _http_date(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)
