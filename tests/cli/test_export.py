"""Tests for ``satpam export``."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from satpam.cli.main import cli


class TestExport:

    def test_compact(self, runner: CliRunner, app_policy: Path) -> None:
        result = runner.invoke(cli, ["export", str(app_policy)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "app/list:read:update",
            "app/user/settings:read:update",
            "app/login:signin",
        ]

    def test_expand(self, runner: CliRunner, app_policy: Path) -> None:
        result = runner.invoke(cli, ["export", str(app_policy), "--expand"])
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 5

    def test_to_sub_root(self, runner: CliRunner, app_policy: Path) -> None:
        result = runner.invoke(cli, ["export", str(app_policy), "--to", "user"])
        assert result.output.splitlines() == ["user/settings:read:update"]

    def test_ignore_invalid(self, runner: CliRunner, invalid_token_file: Path) -> None:
        result = runner.invoke(cli, ["export", str(invalid_token_file), "--ignore-invalid"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["@/home:read"]
