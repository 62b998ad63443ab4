"""Shared fixtures for CLI tests.

Provides temporary policy files in both supported formats.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def app_policy(tmp_path: Path) -> Path:
    """YAML policy rooted at ``app`` with a foreign-prefixed token."""
    policy = tmp_path / "policy.yaml"
    policy.write_text(
        "root: app\n"
        "abilities:\n"
        "  - app/list:read\n"
        "  - app/list:update\n"
        "  - app/user/settings:read:update\n"
        "  - outside/app/login:signin\n"
    )
    return policy


@pytest.fixture
def token_file(tmp_path: Path) -> Path:
    """Plain-text token list for the default ``@`` root."""
    tokens = tmp_path / "tokens.txt"
    tokens.write_text(
        "# archers\n"
        "@/archer:rapid-shot\n"
        "@/archer/sniper:eagle-eye\n"
        "\n"
        "@/archer:rapid-shot\n"
    )
    return tokens


@pytest.fixture
def invalid_token_file(tmp_path: Path) -> Path:
    """Token list mixing a valid token with tokens that have no root."""
    tokens = tmp_path / "invalid.txt"
    tokens.write_text("@/home:read\noutside/login:signin\n@/broken/\n")
    return tokens
