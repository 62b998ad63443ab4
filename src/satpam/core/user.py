"""User capability facade.

Binds one ``Abilities`` store (by reference) to arbitrary subject metadata,
such as the decoded claims of a session token.
"""

from __future__ import annotations

from typing import Any

from satpam.core.abilities import Abilities, Ability


class UserAbilities:
    """A subject together with the store holding its grants.

    Attributes:
        store: The bound store. Grants made through the facade land there.
        meta: Opaque subject metadata, held as given.

    Examples:
        >>> store = Abilities()
        >>> store.add("archer", "rapid-shot").token
        '@/archer:rapid-shot'
        >>> user = store.setup_user({"id": "onepiece", "name": "usopp"})
        >>> user.on("archer").has("rapid-shot")
        True
    """

    def __init__(self, store: Abilities, meta: Any = None) -> None:
        self.store = store
        self.meta = meta

    def on(self, path: str) -> Ability | None:
        return self.store.get(path)

    def can(self, path: str, *actions: str) -> bool:
        """True when ``path`` exists and grants every one of ``actions``."""
        ability = self.store.get(path)
        return ability is not None and ability.has_all(*actions)

    def gain_abilities(self, *abilities: Ability) -> None:
        self.store.push(*abilities)

    def gain_tokens(self, *tokens: str) -> None:
        self.store.import_tokens(tokens)

    def gain(self, *items: Ability | str) -> None:
        """Grant either abilities or tokens.

        Raises:
            TypeError: If abilities and tokens are mixed in one call, or an
                item is neither.
        """
        if all(isinstance(item, Ability) for item in items):
            self.gain_abilities(*items)  # type: ignore[arg-type]
        elif all(isinstance(item, str) for item in items):
            self.gain_tokens(*items)  # type: ignore[arg-type]
        else:
            raise TypeError("gain() takes either Ability objects or token strings, not both")

    def __repr__(self) -> str:
        return f"UserAbilities(meta={self.meta!r}, store={self.store!r})"
