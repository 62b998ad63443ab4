"""Store configuration record.

``AbilitiesOptions`` is fixed at store construction and validated up front,
so a store never runs with a malformed root or an empty default action set.
Instances are frozen; there is no shared mutable default.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable, Mapping

from satpam.core.abilities.grammar import is_valid_action, is_valid_segment
from satpam.exceptions import ConfigError

DEFAULT_ROOT = "@"
DEFAULT_ACTIONS: tuple[str, ...] = ("read", "write", "delete")
ALL_ACTIONS = "all"
"""Reserved action literal that a store expands to its default actions."""


@dataclass(frozen=True)
class AbilitiesOptions:
    """Configuration for an ``Abilities`` store.

    Attributes:
        root: Segment every stored path starts with.
        default_actions: Actions granted when none are given, or in place
            of the ``all`` literal.
        ignore_invalid_token: Drop invalid tokens on import instead of
            raising ``InvalidTokenError``.

    Raises:
        ConfigError: If ``root`` is empty or contains ``/`` or ``:``, or if
            ``default_actions`` is empty, holds a malformed action, or
            holds the ``all`` literal itself, or if ``ignore_invalid_token`` is
            not a bool.
    """

    root: str = DEFAULT_ROOT
    default_actions: tuple[str, ...] = DEFAULT_ACTIONS
    ignore_invalid_token: bool = False

    def __post_init__(self) -> None:
        if not is_valid_segment(self.root):
            raise ConfigError(f"root must be a single non-empty segment, got {self.root!r}")

        actions = _dedupe(self.default_actions)
        if not actions:
            raise ConfigError("default_actions must not be empty")
        for action in actions:
            if not is_valid_action(action):
                raise ConfigError(f"invalid default action: {action!r}")
        if ALL_ACTIONS in actions:
            raise ConfigError(f"default_actions must not contain {ALL_ACTIONS!r}")
        if not isinstance(self.ignore_invalid_token, bool):
            raise ConfigError(
                f"ignore_invalid_token must be true or false, got {self.ignore_invalid_token!r}"
            )
        object.__setattr__(self, "default_actions", actions)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AbilitiesOptions:
        """Build options from a plain mapping such as a parsed YAML document.

        Raises:
            ConfigError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown option(s): {', '.join(unknown)}")
        return cls(**dict(data))


def _dedupe(actions: Iterable[str]) -> tuple[str, ...]:
    if isinstance(actions, str):
        return (actions,)
    try:
        return tuple(dict.fromkeys(actions))
    except TypeError as exc:
        raise ConfigError(f"default_actions must be a list of strings: {exc}") from exc
