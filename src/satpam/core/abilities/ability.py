"""The Ability entity: one capability grant.

An ability couples a ``key`` with the ``parent`` segments it lives under and
the set of actions granted on it. Its ``path`` and ``token`` are always
derived from that state, never stored.

Two rebase operations exist and they differ on purpose:

- assigning ``ability.root`` re-parents the ability **in place**;
- ``ability.shift(root)`` returns a **new** rebased ability and leaves the
  receiver untouched.
"""

from __future__ import annotations

from typing import Iterable

from satpam.core.abilities.grammar import (
    ACTION_SEPARATOR,
    ValidationCode,
    is_valid_action,
    is_valid_segment,
    validate_token,
)
from satpam.core.abilities.paths import SEPARATOR, shift_path
from satpam.exceptions import AbilityError


class Ability:
    """A ``(key, parent, actions)`` triple.

    The constructor accepts three source shapes:

    - a full token (contains ``:``), e.g. ``"app/list:read:update"``;
    - a ``parent/key`` path (contains ``/``), e.g. ``"hero/dc/superman"``;
    - a bare key, e.g. ``"sentai"``.

    ``actions`` are granted on top of whatever the source carries.

    Raises:
        AbilityError: If the source has an empty key, a dangling separator,
            or is a malformed token, or if an action is not a valid token
            action.

    Examples:
        >>> a = Ability("marvel/ironman", ["fly", "laser"])
        >>> a.token
        'marvel/ironman:fly:laser'
        >>> a.shift("hero").path
        'hero/marvel/ironman'
        >>> a.path
        'marvel/ironman'
    """

    def __init__(self, source: str, actions: Iterable[str] = ()) -> None:
        if ACTION_SEPARATOR in source:
            parsed = validate_token(source)
            if not parsed.valid:
                raise AbilityError(source, parsed.code.value, parsed.message)
            key, parent, granted = parsed.key, parsed.parent, parsed.actions
        elif SEPARATOR in source:
            *parent, key = source.split(SEPARATOR)
            if not key:
                raise AbilityError(
                    source, ValidationCode.LEAF.value, "path ends with a separator"
                )
            granted = ()
        else:
            if not source:
                raise AbilityError(source, ValidationCode.KEY.value, "key is empty")
            key, parent, granted = source, (), ()

        self._key: str = key
        self._parent: tuple[str, ...] = tuple(parent)
        self._actions: dict[str, None] = {}
        self.gain(*granted, *_as_actions(actions))

    @classmethod
    def from_parts(
        cls,
        key: str,
        parent: Iterable[str] = (),
        actions: Iterable[str] = (),
    ) -> Ability:
        """Build an ability from already-parsed parts.

        Raises:
            AbilityError: If ``key`` is empty or contains a separator.
        """
        if not is_valid_segment(key):
            raise AbilityError(key, ValidationCode.KEY.value, "key is empty or malformed")
        ability = cls(key)
        ability._parent = tuple(parent)
        ability.gain(*_as_actions(actions))
        return ability

    # -- Derived state ------------------------------------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def parent(self) -> tuple[str, ...]:
        return self._parent

    @property
    def actions(self) -> tuple[str, ...]:
        """Granted actions, in first-grant order."""
        return tuple(self._actions)

    @property
    def path(self) -> str:
        return SEPARATOR.join((*self._parent, self._key))

    @property
    def token(self) -> str:
        """``path:action:...``; just ``path`` while no action is granted."""
        return ACTION_SEPARATOR.join((self.path, *self._actions))

    @property
    def root(self) -> str:
        """First segment of ``path``."""
        return self._parent[0] if self._parent else self._key

    @root.setter
    def root(self, root: str) -> None:
        # Re-parent in place: cut the parent at ``root``, or prepend it.
        if not is_valid_segment(root):
            raise ValueError(f"invalid root segment: {root!r}")
        if not self._parent:
            self._parent = (root,)
            return
        shifted = shift_path(self._parent, root)
        if shifted:
            self._parent = tuple(shifted.split(SEPARATOR))
        else:
            self._parent = (root, *self._parent)

    # -- Queries ------------------------------------------------------------

    def has(self, action: str) -> bool:
        return action in self._actions

    def has_any(self, *actions: str) -> bool:
        """True if at least one of ``actions`` is granted (False for none)."""
        return any(self.has(action) for action in actions)

    def has_all(self, *actions: str) -> bool:
        """True if every one of ``actions`` is granted (True for none)."""
        return all(self.has(action) for action in actions)

    # -- Mutation -----------------------------------------------------------

    def gain(self, *actions: str) -> Ability:
        """Grant actions. Granting an action twice is a no-op.

        Returns:
            This ability, so grants can be chained.

        Raises:
            AbilityError: If an action is empty or contains ``:`` or ``/``.
        """
        for action in actions:
            if not is_valid_action(action):
                raise AbilityError(
                    str(action), ValidationCode.ACTION.value,
                    f"action is empty or malformed on {self.path!r}",
                )
        for action in actions:
            self._actions.setdefault(action, None)
        return self

    def remove(self, action: str) -> bool:
        """Revoke ``action``. Returns False when it was not granted."""
        if action not in self._actions:
            return False
        del self._actions[action]
        return True

    def shift(self, root: str) -> Ability:
        """Return a copy rebased onto ``root``; this ability is unchanged.

        An empty ``root``, or one equal to the current root, yields a plain
        copy.
        """
        shifted = self.copy()
        if root and root != self.root:
            shifted.root = root
        return shifted

    def copy(self) -> Ability:
        return Ability.from_parts(self._key, self._parent, self._actions)

    # -- Dunder -------------------------------------------------------------

    def __contains__(self, action: object) -> bool:
        return isinstance(action, str) and self.has(action)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ability):
            return NotImplemented
        return self.path == other.path and set(self._actions) == set(other._actions)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ability({self.path!r}, actions={list(self._actions)!r})"


def _as_actions(actions: Iterable[str]) -> tuple[str, ...]:
    # A lone string is one action, not a sequence of characters.
    if isinstance(actions, str):
        return (actions,)
    return tuple(actions)
