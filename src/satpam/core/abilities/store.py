"""Abilities store: root-scoped, path-keyed collection of abilities.

The store maps canonical paths to exactly one ``Ability`` each. Every path
it accepts is normalised to start with the configured root segment:

- bare paths are prefixed (``"home"`` becomes ``"@/home"``);
- tokens whose root sits behind a foreign prefix are cut at the root
  (``"outside/app/login:signin"`` becomes ``"app/login:signin"``);
- tokens with no root at all are rejected, or dropped when the store is
  lenient.

Writes never overwrite: a second grant on an existing path merges its
actions into the stored ability. ``get`` returns the stored ability itself,
so ``gain``/``remove`` on the returned object is the update.

A store is a single-owner object with no internal locking. Because ``get``
hands out live references, sharing one store between threads requires
external synchronisation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from satpam.core.abilities.ability import Ability
from satpam.core.abilities.grammar import ValidationCode, validate_token
from satpam.core.abilities.options import ALL_ACTIONS, AbilitiesOptions
from satpam.core.abilities.paths import SEPARATOR, shift_path
from satpam.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from satpam.core.user import UserAbilities

logger = logging.getLogger(__name__)


class Abilities:
    """In-memory capability store for one subject.

    Args:
        options: Store configuration. Defaults to root ``"@"`` with
            ``read``/``write``/``delete`` default actions and strict import.

    Examples:
        >>> store = Abilities()
        >>> store.add("home").actions
        ('read', 'write', 'delete')
        >>> store.get("@/home") is store.get("home")
        True
    """

    def __init__(self, options: AbilitiesOptions | None = None) -> None:
        self._options = options if options is not None else AbilitiesOptions()
        self._abilities: dict[str, Ability] = {}

    # -- Configuration ------------------------------------------------------

    @property
    def options(self) -> AbilitiesOptions:
        return self._options

    @property
    def root(self) -> str:
        return self._options.root

    @property
    def default_actions(self) -> tuple[str, ...]:
        return self._options.default_actions

    @property
    def ignore_invalid_token(self) -> bool:
        return self._options.ignore_invalid_token

    # -- Writes -------------------------------------------------------------

    def add(self, path: str, *actions: str) -> Ability:
        """Grant ``actions`` on ``path``, merging with any existing grant.

        ``path`` may also be a full token; its own actions are granted too.
        With no actions at all, or with the ``all`` literal, the store's
        default actions are granted.

        Returns:
            The stored ability for the path.

        Raises:
            AbilityError: If the path is malformed (empty key, trailing
                ``/``, bad token).
        """
        ability = Ability(self._normalize(path), actions)
        return self._store(ability)

    def push(self, *abilities: Ability) -> None:
        """Insert or merge ready-made abilities.

        An ability whose root differs from the store's is re-parented onto
        the store root **in place**, so the caller's object changes too.
        The store keeps its own copy.
        """
        for ability in abilities:
            if ability.root != self.root:
                ability.root = self.root
            self._store(ability.copy())

    def import_tokens(self, tokens: str | Iterable[str]) -> None:
        """Parse tokens and merge them into the store.

        Tokens are validated against the store root. A token whose root
        appears after a foreign prefix is cut at the root and accepted.
        A single token string is accepted in place of an iterable.

        Raises:
            InvalidTokenError: For any other invalid token, unless the store
                was configured with ``ignore_invalid_token``.
        """
        if isinstance(tokens, str):
            tokens = (tokens,)
        for token in tokens:
            parsed = validate_token(token, self.root)
            if parsed.code is ValidationCode.HAS_ROOT:
                recut = shift_path(token, self.root)
                logger.debug("Re-rooting token %r as %r", token, recut)
                parsed = validate_token(recut, self.root)

            if not parsed.valid:
                if self.ignore_invalid_token:
                    logger.debug("Dropping invalid token %r (%s)", token, parsed.code.value)
                    continue
                raise InvalidTokenError(token, parsed.code.value, parsed.message)

            self._store(Ability.from_parts(parsed.key, parsed.parent, parsed.actions))

    # -- Reads --------------------------------------------------------------

    def export_tokens(self, root: str = "", compact: bool = True) -> list[str]:
        """Serialise stored abilities as tokens cut to ``root``.

        Args:
            root: Segment exported paths start with. Defaults to the store
                root.
            compact: One token per path with all of its actions when True,
                one token per ``(path, action)`` pair when False.

        Returns:
            Tokens in insertion order. Abilities whose path does not contain
            ``root``, and abilities with every action revoked, are left out.
        """
        root = root or self.root
        tokens: list[str] = []
        for path, ability in self._abilities.items():
            cut = shift_path(path, root)
            if not cut:
                logger.debug("Skipping %r on export: no %r segment", path, root)
                continue
            if compact:
                if ability.actions:
                    tokens.append(":".join((cut, *ability.actions)))
            else:
                tokens.extend(f"{cut}:{action}" for action in ability.actions)
        return tokens

    def get(self, path: str) -> Ability | None:
        """Return the stored ability for ``path``, or None.

        The returned object is the store's own: granting or removing actions
        on it updates the store directly.
        """
        return self._abilities.get(self._normalize(path))

    def exist(self, path: str) -> bool:
        return self._normalize(path) in self._abilities

    @property
    def count(self) -> int:
        """Number of distinct stored paths."""
        return len(self._abilities)

    @property
    def paths(self) -> list[str]:
        return list(self._abilities)

    def setup_user(self, meta: Any = None) -> UserAbilities:
        """Bind this store and arbitrary subject metadata into a facade."""
        from satpam.core.user import UserAbilities

        return UserAbilities(self, meta)

    # -- Internals ----------------------------------------------------------

    def _normalize(self, path: str) -> str:
        if path.split(SEPARATOR)[0] != self.root:
            return f"{self.root}{SEPARATOR}{path}"
        return path

    def _resolve_actions(self, ability: Ability) -> None:
        if not ability.actions:
            ability.gain(*self.default_actions)
        elif ability.remove(ALL_ACTIONS):
            ability.gain(*self.default_actions)

    def _store(self, ability: Ability) -> Ability:
        self._resolve_actions(ability)
        current = self._abilities.get(ability.path)
        if current is not None:
            logger.debug("Merging %s into %r", list(ability.actions), current.path)
            current.gain(*ability.actions)
            return current
        self._abilities[ability.path] = ability
        return ability

    # -- Dunder -------------------------------------------------------------

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.exist(path)

    def __iter__(self) -> Iterator[Ability]:
        return iter(self._abilities.values())

    def __len__(self) -> int:
        return len(self._abilities)

    def __repr__(self) -> str:
        return f"Abilities(root={self.root!r}, count={self.count})"
