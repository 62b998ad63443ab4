"""Token grammar and validator.

A token serializes one ability::

    TOKEN := [SEGMENT ("/" SEGMENT)* "/"] KEY (":" ACTION)+

The validator splits on ``/``, takes the last segment as the leaf, and
splits the leaf on ``:`` into the key and its actions. When a root is
required, the first segment must equal it. A token whose root appears
only deeper in the path (``outside/app/login:signin`` for root ``app``) is
reported as ``has-root``: the caller can cut the foreign prefix off and
validate again instead of rejecting it.

The literal ``all`` is an ordinary action at this level; expanding it is
the store's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from satpam.core.abilities.paths import SEPARATOR

ACTION_SEPARATOR = ":"


class ValidationCode(str, Enum):
    """Outcome of validating a single token."""

    VALID = "valid"
    NO_ROOT = "no-root"
    HAS_ROOT = "has-root"
    LEAF = "leaf"
    KEY = "key"
    ACTION = "action"


_MESSAGES: dict[ValidationCode, str] = {
    ValidationCode.VALID: "token is valid",
    ValidationCode.NO_ROOT: "token does not contain the root segment",
    ValidationCode.HAS_ROOT: "root segment found after a foreign prefix",
    ValidationCode.LEAF: "token has no leaf segment",
    ValidationCode.KEY: "token has an empty key",
    ValidationCode.ACTION: "token has no actions or an empty action",
}


@dataclass(frozen=True)
class TokenValidation:
    """Result of ``validate_token``.

    Attributes:
        token: The token that was validated.
        code: The validation outcome.
        message: Human-readable description of ``code``.
        parent: Parent segments, populated only when valid.
        key: The leaf key, populated only when valid.
        actions: Actions in token order, populated only when valid.
    """

    token: str
    code: ValidationCode
    message: str
    parent: tuple[str, ...] = ()
    key: str = ""
    actions: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return self.code is ValidationCode.VALID

    @property
    def recoverable(self) -> bool:
        """True when re-cutting the token at the root would fix it."""
        return self.code is ValidationCode.HAS_ROOT


def _fail(token: str, code: ValidationCode) -> TokenValidation:
    return TokenValidation(token=token, code=code, message=_MESSAGES[code])


def validate_token(token: str, root: str = "") -> TokenValidation:
    """Parse and classify a token.

    Args:
        token: Token string such as ``"app/user/settings:read:update"``.
        root: Required first segment. Empty means no root check.

    Returns:
        A ``TokenValidation``. Only a ``valid`` result carries the parsed
        parent, key and actions.
    """
    branch = token.split(SEPARATOR)
    leaf = branch.pop()

    if root and (not branch or branch[0] != root):
        if root in branch:
            return _fail(token, ValidationCode.HAS_ROOT)
        return _fail(token, ValidationCode.NO_ROOT)

    if not leaf:
        return _fail(token, ValidationCode.LEAF)

    key, *actions = leaf.split(ACTION_SEPARATOR)
    if not key:
        return _fail(token, ValidationCode.KEY)
    if not actions or not all(actions):
        return _fail(token, ValidationCode.ACTION)

    return TokenValidation(
        token=token,
        code=ValidationCode.VALID,
        message=_MESSAGES[ValidationCode.VALID],
        parent=tuple(branch),
        key=key,
        actions=tuple(actions),
    )


def is_valid_action(action: object) -> bool:
    """Check that ``action`` can appear in a token as one ``ACTION``."""
    return (
        isinstance(action, str)
        and bool(action)
        and ACTION_SEPARATOR not in action
        and SEPARATOR not in action
    )


def is_valid_segment(segment: object) -> bool:
    """Check that ``segment`` can be used as a single path segment or root."""
    return is_valid_action(segment)
