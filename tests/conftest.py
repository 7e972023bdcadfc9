"""Shared fixtures: a small Elixir project laid out on disk."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from codeassist.registry import load_profiles
from codeassist.schemas.context import Language
from codeassist.schemas.profile import LanguageProfile

SAMPLE_FILES: dict[str, str] = {
    "a.ex": """\
        defmodule A do
          def hello, do: :world
        end
        """,
    "another.ex": """\
        defmodule Another do
          alias Another.Missing
        end
        """,
    "b.exs": """\
        defmodule B do
        end
        """,
    "debug_single_file.ex": """\
        defmodule DebugSingleFile do
          alias DebugSingleFile
        end
        """,
    "lib/d.ex": """\
        defmodule D do
          alias D
        end
        """,
    "lib/primary_four/helper_d.ex": """\
        defmodule PrimaryFour.HelperD do
        end
        """,
    "lib/primary_four/sub_module.ex": """\
        defmodule PrimaryFour.SubModule do
          alias PrimaryFour.HelperD
          alias PrimaryFour.SubModule.HelperE
        end
        """,
    "lib/primary_four/sub_module/helper_e.ex": """\
        defmodule PrimaryFour.SubModule.HelperE do
        end
        """,
    "lib/primary_one.ex": """\
        defmodule PrimaryOne do
          alias PrimaryOne.HelperA
          alias PrimaryOne.HelperB
          alias PrimaryOne.NonExistentHelper # mapped, but not a project file
          alias ExternalLib.Something      # different namespace root
          alias PrimaryOne                 # the module itself
        end
        """,
    "lib/primary_one/helper_a.ex": """\
        defmodule PrimaryOne.HelperA do
        end
        """,
    "lib/primary_one/helper_b.ex": """\
        defmodule PrimaryOne.HelperB do
        end
        """,
    "lib/primary_three_no_relevant_aliases.ex": """\
        defmodule PrimaryThreeNoRelevantAliases do
          alias ExternalLib.Thing
          alias Enum
        end
        """,
    "primary_two_no_module.ex": """\
        # no module declared in this file
        alias PrimaryTwo.Helper
        """,
    "test/non_existent_source_test.exs": """\
        defmodule NonExistentSourceTest do
          use ExUnit.Case
        end
        """,
    "test/primary_four_sub_module_test.exs": """\
        defmodule PrimaryFourSubModuleTest do
          use ExUnit.Case
          alias PrimaryFourSubModule
        end
        """,
    "test/primary_one_test.exs": """\
        defmodule PrimaryOneTest do
          use ExUnit.Case
          alias PrimaryOne.HelperA
        end
        """,
    "test/primary_three_no_relevant_aliases_test.exs": """\
        defmodule PrimaryThreeNoRelevantAliasesTest do
          use ExUnit.Case
        end
        """,
}

ALL_PROJECT_FILES: list[str] = sorted(SAMPLE_FILES)


@pytest.fixture()
def elixir_project(tmp_path: Path) -> Path:
    """Create the sample Elixir project plus files discovery must ignore."""
    root = tmp_path / "sample_elixir_project"
    for rel_path, content in SAMPLE_FILES.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")

    # Not source files
    (root / "README.md").write_text("# Sample\n", encoding="utf-8")
    (root / "mix.lock").write_text("%{}\n", encoding="utf-8")

    # Build output, dependencies and private assets
    for excluded in ("_build/dev/lib/x.ex", "deps/jason/lib/jason.ex", "priv/repo/seeds.exs"):
        path = root / excluded
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("defmodule Excluded do\nend\n", encoding="utf-8")

    return root


@pytest.fixture()
def elixir_profile() -> LanguageProfile:
    return load_profiles()[Language.ELIXIR]


@pytest.fixture()
def project_files() -> list[str]:
    """Sorted relative paths of every project file in ``elixir_project``."""
    return list(ALL_PROJECT_FILES)
