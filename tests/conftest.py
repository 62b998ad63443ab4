"""Shared fixtures for satpam tests."""

import pytest

from satpam import Abilities, AbilitiesOptions


@pytest.fixture
def app_store() -> Abilities:
    """Store rooted at ``app`` loaded with the reference import tokens."""
    store = Abilities(AbilitiesOptions(root="app"))
    store.import_tokens([
        "app/list:read",
        "app/list:update",
        "app/user/settings:read:update",
        "outside/app/login:signin",
    ])
    return store


@pytest.fixture
def default_store() -> Abilities:
    """Store with the default ``@`` root and read/write/delete defaults."""
    return Abilities()
