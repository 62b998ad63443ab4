"""Session collaborators: cookie codec and bearer-token extraction.

These sit outside the capability core. Once a subject is identified from
its session token, the application builds an ``Abilities`` store for it.
"""

from satpam.session.cookie_session import (
    CookieSession,
    SessionValue,
    create_cookie_session,
    detect_url,
)
from satpam.session.cookies import CookieOptions, parse_cookies, serialize_cookie
from satpam.session.guard import (
    RefreshSession,
    Satpam,
    SatpamOptions,
    SatpamSession,
    TokenPair,
)

__all__ = [
    "CookieOptions",
    "CookieSession",
    "RefreshSession",
    "Satpam",
    "SatpamOptions",
    "SatpamSession",
    "SessionValue",
    "TokenPair",
    "create_cookie_session",
    "detect_url",
    "parse_cookies",
    "serialize_cookie",
]
