"""Tests for shift_path, the path re-scoping utility."""

from __future__ import annotations

import pytest

from satpam.core.abilities import shift_path


class TestShiftPath:
    """Cutting a path at the first occurrence of a root segment."""

    @pytest.mark.parametrize(
        ("path", "root", "expected"),
        [
            ("app/list", "app", "app/list"),
            ("outside/app/login", "app", "app/login"),
            ("a/b/c/d", "c", "c/d"),
            ("app", "app", "app"),
        ],
    )
    def test_cuts_at_root(self, path: str, root: str, expected: str) -> None:
        assert shift_path(path, root) == expected

    def test_missing_root_returns_empty_string(self) -> None:
        assert shift_path("outside/login", "app") == ""

    def test_uses_first_occurrence(self) -> None:
        assert shift_path("x/app/y/app/z", "app") == "app/y/app/z"

    def test_matches_whole_segments_only(self) -> None:
        """'application' is not the segment 'app'."""
        assert shift_path("application/list", "app") == ""

    def test_accepts_segment_sequence(self) -> None:
        assert shift_path(("hero", "dc"), "dc") == "dc"
        assert shift_path(["marvel"], "hero") == ""
