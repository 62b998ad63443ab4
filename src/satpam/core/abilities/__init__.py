"""Hierarchical capability model.

Submodules
----------
- ``paths``: ``shift_path`` path re-scoping.
- ``grammar``: ``validate_token``, ``ValidationCode``, ``TokenValidation``.
- ``ability``: the ``Ability`` entity.
- ``options``: ``AbilitiesOptions`` store configuration.
- ``store``: the ``Abilities`` store.

All public names are re-exported here::

    from satpam.core.abilities import Abilities, Ability, validate_token
"""

from satpam.core.abilities.ability import Ability
from satpam.core.abilities.grammar import (
    TokenValidation,
    ValidationCode,
    validate_token,
)
from satpam.core.abilities.options import (
    ALL_ACTIONS,
    DEFAULT_ACTIONS,
    DEFAULT_ROOT,
    AbilitiesOptions,
)
from satpam.core.abilities.paths import shift_path
from satpam.core.abilities.store import Abilities

__all__ = [
    "ALL_ACTIONS",
    "Abilities",
    "AbilitiesOptions",
    "Ability",
    "DEFAULT_ACTIONS",
    "DEFAULT_ROOT",
    "TokenValidation",
    "ValidationCode",
    "shift_path",
    "validate_token",
]
