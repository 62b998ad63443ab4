"""Satpam exception hierarchy.

All public exceptions inherit from SatpamError, giving callers a single
base class to catch when they want to handle any Satpam-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations


class SatpamError(Exception):
    """Base exception for all Satpam errors."""


class AbilityError(SatpamError):
    """Raised when an ability cannot be built from its source string.

    Covers empty keys, dangling ``/`` separators, malformed tokens and
    action strings that would break the token grammar. The offending
    input and the validator's reason code are kept on the instance.

    Attributes:
        token: The string that failed to parse.
        code: Reason code (a ``ValidationCode`` value such as ``"key"``).
        reason: Human-readable explanation.
    """

    def __init__(self, token: str, code: str, reason: str) -> None:
        self.token = token
        self.code = code
        self.reason = reason
        super().__init__(f"invalid ability {token!r} [{code}]: {reason}")


class InvalidTokenError(AbilityError):
    """Raised by a strict store import when a token is rejected.

    Tokens whose root only appears deeper in the path are re-rooted rather
    than rejected, so this is raised for ``no-root``, ``leaf``, ``key``
    and ``action`` failures only.
    """


class ConfigError(SatpamError):
    """Raised for invalid store options or unreadable policy files.

    Covers malformed root segments, empty default action sets, unknown
    option keys and YAML documents of the wrong shape.
    """
