"""Tests for project file discovery and primary file selection."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from codeassist.discovery.scanner import ProjectScanner
from codeassist.discovery.selector import select_primary_files

_EXTENSIONS = [".ex", ".exs"]
_EXCLUDED = ["_build/", "deps/", "priv/"]


def _scanner(root: Path) -> ProjectScanner:
    return ProjectScanner(root, _EXTENSIONS, _EXCLUDED)


# ── Scanner Tests ─────────────────────────────────────────────────


class TestProjectScanner:
    def test_discovers_all_source_and_test_files(self, elixir_project: Path, project_files):
        assert _scanner(elixir_project).scan() == project_files

    def test_output_is_sorted(self, elixir_project: Path):
        files = _scanner(elixir_project).scan()
        assert files == sorted(files)

    def test_excludes_build_deps_and_priv(self, elixir_project: Path):
        files = _scanner(elixir_project).scan()
        for prefix in _EXCLUDED:
            assert not any(f.startswith(prefix) for f in files)

    def test_ignores_other_extensions(self, elixir_project: Path):
        files = _scanner(elixir_project).scan()
        assert "README.md" not in files
        assert "mix.lock" not in files

    def test_paths_are_relative_with_forward_slashes(self, elixir_project: Path):
        for f in _scanner(elixir_project).scan():
            assert not Path(f).is_absolute()
            assert "\\" not in f

    def test_prefix_only_matches_path_start(self, tmp_path: Path):
        nested = tmp_path / "lib" / "deps"
        nested.mkdir(parents=True)
        (nested / "kept.ex").write_text("defmodule Kept do\nend\n", encoding="utf-8")
        assert _scanner(tmp_path).scan() == ["lib/deps/kept.ex"]

    def test_skips_hidden_files_and_directories(self, tmp_path: Path):
        (tmp_path / "lib").mkdir()
        (tmp_path / "lib" / "a.ex").write_text("defmodule A do\nend\n", encoding="utf-8")
        (tmp_path / ".formatter.exs").write_text("[inputs: []]\n", encoding="utf-8")
        (tmp_path / ".elixir_ls").mkdir()
        (tmp_path / ".elixir_ls" / "x.ex").write_text("defmodule X do\nend\n", encoding="utf-8")
        assert _scanner(tmp_path).scan() == ["lib/a.ex"]

    def test_excluded_directories_are_not_walked(self, elixir_project: Path, monkeypatch):
        visited: list[str] = []
        real_walk = os.walk

        def recording_walk(top, *args, **kwargs):
            for entry in real_walk(top, *args, **kwargs):
                visited.append(Path(entry[0]).relative_to(elixir_project).as_posix())
                yield entry

        monkeypatch.setattr("codeassist.discovery.scanner.os.walk", recording_walk)
        _scanner(elixir_project).scan()
        assert "lib" in visited
        for prefix in ("_build", "deps", "priv"):
            assert not any(d == prefix or d.startswith(f"{prefix}/") for d in visited)

    def test_empty_directory(self, tmp_path: Path):
        assert _scanner(tmp_path).scan() == []

    def test_nonexistent_directory(self, tmp_path: Path):
        assert _scanner(tmp_path / "missing").scan() == []

    def test_no_extensions_matches_nothing(self, elixir_project: Path):
        assert ProjectScanner(elixir_project).scan() == []

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permission bits are not enforced",
    )
    def test_unreadable_directory_is_skipped(self, elixir_project: Path, project_files):
        locked = elixir_project / "lib" / "locked"
        locked.mkdir()
        (locked / "hidden.ex").write_text("defmodule Hidden do\nend\n", encoding="utf-8")
        locked.chmod(0)
        try:
            files = _scanner(elixir_project).scan()
        finally:
            locked.chmod(0o755)
        assert files == project_files


# ── Selector Tests ────────────────────────────────────────────────


class TestSelectPrimaryFiles:
    def test_no_filter_selects_everything(self, project_files):
        assert select_primary_files(project_files, None) == project_files

    def test_empty_filter_selects_everything(self, project_files):
        assert select_primary_files(project_files, "") == project_files

    def test_exact_path_filter(self, project_files):
        assert select_primary_files(project_files, "lib/primary_one.ex") == [
            "lib/primary_one.ex",
        ]

    def test_substring_filter_keeps_order(self, project_files):
        assert select_primary_files(project_files, "primary_one") == [
            "lib/primary_one.ex",
            "lib/primary_one/helper_a.ex",
            "lib/primary_one/helper_b.ex",
            "test/primary_one_test.exs",
        ]

    def test_filter_is_literal_not_glob(self, project_files):
        assert select_primary_files(project_files, "*.ex") == []

    def test_filter_is_literal_not_regex(self):
        # "." would match any character as a regex
        assert select_primary_files(["lib/aXex"], ".ex") == []

    def test_filter_is_case_sensitive(self, project_files):
        assert select_primary_files(project_files, "PRIMARY_ONE") == []

    def test_no_match_yields_empty(self, project_files):
        assert select_primary_files(project_files, "nonexistent_string_pattern") == []

    def test_matches_are_the_containing_paths(self, project_files):
        expected = [p for p in project_files if ".ex" in p]
        assert select_primary_files(project_files, ".ex") == expected

    def test_does_not_mutate_input(self):
        files = ["a.ex", "b.ex"]
        selected = select_primary_files(files, None)
        selected.append("c.ex")
        assert files == ["a.ex", "b.ex"]
