"""Bearer-token extraction from cookies, headers and URLs.

``Satpam`` looks for a session token (and optional refresh token) in one
request source, passes it through validation hooks, and reports the outcome
as a ``SatpamSession`` carrying ready-to-send ``Set-Cookie`` values.

Hooks take a ``TokenPair`` and return a replacement: a pair, a mapping
with ``token``/``refresh`` keys, a ``(token, refresh)`` tuple, or a bare
token string that keeps the current refresh token. None keeps the input.
Hooks may be plain functions or coroutines. A per-call hook runs first,
then the global ``on_validation`` hook from ``SatpamOptions``.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, NamedTuple, Union
from urllib.parse import parse_qs, urlsplit

from satpam.session.cookies import CookieOptions, parse_cookies, serialize_cookie

logger = logging.getLogger(__name__)


class TokenPair(NamedTuple):
    """Session token and refresh token as found in (or set by) a hook."""

    token: str | None = None
    refresh: str | None = None


HookResult = Union[TokenPair, Mapping[str, Any], tuple, str, None]
ValidationHook = Callable[[TokenPair], Union[HookResult, Awaitable[HookResult]]]


@dataclass(frozen=True)
class RefreshSession:
    token: str
    serialized: str


@dataclass(frozen=True)
class SatpamSession:
    """Outcome of a token lookup.

    Attributes:
        status: True when a non-empty token survived validation.
        token: The session token, ``""`` when absent.
        serialized: ``Set-Cookie`` value for the token, ``""`` when absent.
        refresh: Refresh token and its cookie, when one was found.
    """

    status: bool = False
    token: str = ""
    serialized: str = ""
    refresh: RefreshSession | None = None


@dataclass(frozen=True)
class SatpamOptions:
    """Cookie naming and global validation for ``Satpam``.

    Attributes:
        name: Session cookie name, prefixed as ``<prefix>.<name>``.
        refresh_name: Refresh cookie name, prefixed the same way.
        cookie_options: Attributes for serialised cookies.
        on_validation: Hook applied to every lookup.
    """

    name: str = "satpam"
    refresh_name: str = "refresh"
    cookie_options: CookieOptions | None = None
    on_validation: ValidationHook | None = None


class Satpam:
    """Token extractor for one application cookie prefix.

    Examples::

        satpam = Satpam("app")
        session = await satpam.on_cookies(request.headers.get("cookie"))
        if session.status:
            response.headers["Set-Cookie"] = session.serialized
    """

    def __init__(self, prefix: str, options: SatpamOptions | None = None) -> None:
        self.prefix = prefix
        self.options = options or SatpamOptions()

    @property
    def cookie_name(self) -> str:
        return self._prefixed(self.options.name)

    @property
    def refresh_cookie(self) -> str:
        return self._prefixed(self.options.refresh_name)

    def _prefixed(self, name: str) -> str:
        return f"{self.prefix}.{name}" if self.prefix else name

    async def on_cookies(
        self,
        cookies: str | Mapping[str, str] | None,
        hook: ValidationHook | None = None,
    ) -> SatpamSession:
        """Read the session from a ``Cookie`` header or parsed cookie mapping."""
        parsed = parse_cookies(cookies)
        pair = TokenPair(parsed.get(self.cookie_name), parsed.get(self.refresh_cookie))
        return await self._resolve(pair, hook, source="cookies")

    async def on_url(
        self,
        param: str,
        url: str,
        hook: ValidationHook | None = None,
    ) -> SatpamSession:
        """Read the token from URL query parameter ``param``, then the fragment."""
        parts = urlsplit(str(url))
        token = None
        for query in (parts.query, parts.fragment):
            values = parse_qs(query).get(param)
            if values:
                token = values[0]
                break
        return await self._resolve(TokenPair(token, None), hook, source="url")

    async def on_headers(
        self,
        header: str,
        headers: Mapping[str, str],
        hook: ValidationHook | None = None,
    ) -> SatpamSession:
        """Read the token from request header ``header`` (case-insensitive).

        A ``cookie`` header is parsed as cookies, so both session and refresh
        cookies are picked up.
        """
        lookup = {str(name).lower(): value for name, value in headers.items()}
        name = header.lower()
        if name == "cookie":
            return await self.on_cookies(lookup.get(name), hook)
        return await self._resolve(TokenPair(lookup.get(name), None), hook, source="headers")

    async def _resolve(
        self,
        pair: TokenPair,
        hook: ValidationHook | None,
        source: str,
    ) -> SatpamSession:
        for validate in (hook, self.options.on_validation):
            if validate is None:
                continue
            result = validate(pair)
            if inspect.isawaitable(result):
                result = await result
            if result is not None:
                pair = _as_pair(result, pair)

        if not pair.token:
            logger.debug("No session token found in %s", source)
            return SatpamSession()

        logger.debug("Session token resolved from %s", source)
        refresh = None
        if pair.refresh:
            refresh = RefreshSession(
                token=pair.refresh,
                serialized=serialize_cookie(
                    self.refresh_cookie, pair.refresh, self.options.cookie_options
                ),
            )
        return SatpamSession(
            status=True,
            token=pair.token,
            serialized=serialize_cookie(self.cookie_name, pair.token, self.options.cookie_options),
            refresh=refresh,
        )


def _as_pair(result: Any, current: TokenPair) -> TokenPair:
    if isinstance(result, TokenPair):
        return result
    if isinstance(result, str):
        return TokenPair(result, current.refresh)
    if isinstance(result, Mapping):
        return TokenPair(result.get("token"), result.get("refresh"))
    if isinstance(result, tuple) and len(result) == 2:
        return TokenPair(*result)
    raise TypeError(
        "validation hook must return a TokenPair, mapping, (token, refresh) "
        f"tuple, token string or None, got {type(result).__name__}"
    )
