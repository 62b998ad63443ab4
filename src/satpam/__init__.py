"""Satpam: hierarchical, path-addressed capability tokens.

Abilities are ``key`` + ``parent`` path + action set triples, serialized as
``parent/key:action:action`` tokens and held in a root-scoped store::

    from satpam import Abilities, AbilitiesOptions

    abilities = Abilities(AbilitiesOptions(root="app"))
    abilities.import_tokens(["app/list:read", "outside/app/login:signin"])
    abilities.get("app/login").has("signin")   # True
"""

from __future__ import annotations

from satpam.core.abilities import (
    Abilities,
    AbilitiesOptions,
    Ability,
    TokenValidation,
    ValidationCode,
    shift_path,
    validate_token,
)
from satpam.core.user import UserAbilities
from satpam.exceptions import (
    AbilityError,
    ConfigError,
    InvalidTokenError,
    SatpamError,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "Abilities",
    "AbilitiesOptions",
    "Ability",
    "AbilityError",
    "ConfigError",
    "InvalidTokenError",
    "SatpamError",
    "TokenValidation",
    "UserAbilities",
    "ValidationCode",
    "shift_path",
    "validate_token",
]
