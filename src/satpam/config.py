"""Policy files: store options plus the tokens to load into a store.

Two formats are accepted:

- YAML (``.yaml`` / ``.yml``)::

      root: app
      default_actions: [read, write, delete]
      ignore_invalid_token: false
      abilities:
        - app/list:read
        - app/user/settings:read:update

  Every key is optional.

- Plain text (any other suffix): one token per line. Blank lines and lines
  starting with ``#`` are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterable

import yaml

from satpam.core.abilities import Abilities, AbilitiesOptions
from satpam.exceptions import ConfigError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass(frozen=True)
class Policy:
    """Store options together with the tokens a store is seeded with."""

    options: AbilitiesOptions = field(default_factory=AbilitiesOptions)
    tokens: tuple[str, ...] = ()

    def with_overrides(
        self,
        root: str | None = None,
        ignore_invalid_token: bool | None = None,
    ) -> Policy:
        """Return a copy with the given option values replaced.

        Raises:
            ConfigError: If an override is invalid.
        """
        changes: dict[str, Any] = {}
        if root is not None:
            changes["root"] = root
        if ignore_invalid_token is not None:
            changes["ignore_invalid_token"] = ignore_invalid_token
        if not changes:
            return self
        return replace(self, options=replace(self.options, **changes))

    def build(self) -> Abilities:
        """Create a store and import the policy tokens into it.

        Raises:
            InvalidTokenError: On an invalid token with a strict store.
        """
        store = Abilities(self.options)
        store.import_tokens(self.tokens)
        return store


def parse_token_lines(lines: Iterable[str]) -> tuple[str, ...]:
    """Extract tokens from text lines, skipping blanks and ``#`` comments."""
    tokens = []
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            tokens.append(stripped)
    return tuple(tokens)


def load_policy(path: str | Path) -> Policy:
    """Load a YAML or plain-text policy file.

    Raises:
        ConfigError: If the file cannot be read or has the wrong shape.
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"cannot read policy file {file_path}: {exc}") from exc

    if file_path.suffix.lower() not in YAML_SUFFIXES:
        tokens = parse_token_lines(raw.splitlines())
        logger.debug("Loaded %d token(s) from %s", len(tokens), file_path)
        return Policy(tokens=tokens)

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"malformed YAML in {file_path}: {exc}") from exc
    policy = policy_from_mapping(data or {})
    logger.debug("Loaded %d token(s) from %s", len(policy.tokens), file_path)
    return policy


def policy_from_mapping(data: Any) -> Policy:
    """Build a ``Policy`` from a parsed YAML document.

    Raises:
        ConfigError: If the document is not a mapping, ``abilities`` is not
            a list of strings, or the options are invalid.
    """
    if not isinstance(data, dict):
        raise ConfigError("policy document must be a mapping")
    settings = dict(data)
    abilities = settings.pop("abilities", None) or []
    if not isinstance(abilities, list) or not all(isinstance(t, str) for t in abilities):
        raise ConfigError("'abilities' must be a list of token strings")
    try:
        options = AbilitiesOptions.from_mapping(settings)
    except TypeError as exc:
        raise ConfigError(f"invalid options: {exc}") from exc
    return Policy(options=options, tokens=tuple(abilities))
